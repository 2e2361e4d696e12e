"""
GOOD: one class per reason to change.

- `User` only holds data.
- `UserRepository` only stores users.
- `EmailService` only sends emails.

The collaborators take the user as an argument and never keep it.
They only read the attributes they need (`Named`, `Addressable`),
so the `User` from `bad.py` works with them just as well.
Their effects go through an `IOutput`, the console unless told otherwise.
"""

import logging
from dataclasses import dataclass
from typing import Union

from ...config import (
    EMAIL_SENT,
    PASSWORD_RESET_EMAIL_SENT,
    USER_DELETED,
    USER_SAVED,
    USER_UPDATED,
    WELCOME_EMAIL_SENT,
)
from ...interfaces import Addressable, IOutput, Named
from ...output import ConsoleOutput

logger = logging.getLogger(__name__)


@dataclass
class User:
    name: str
    email: str


class UserRepository:
    def __init__(self, output: Union[IOutput, None] = None):
        self._output = output if output is not None else ConsoleOutput()

    @property
    def output(self) -> IOutput:
        return self._output

    def save_to_database(self, user: Named) -> None:
        logger.debug("saving %r", user)
        self._output.write(USER_SAVED)

    def update_user(self, user: Named) -> None:
        logger.debug("updating %r", user)
        self._output.write(USER_UPDATED.format(name=user.name))

    def delete_user(self, user: Named) -> None:
        logger.debug("deleting %r", user)
        self._output.write(USER_DELETED.format(name=user.name))


class EmailService:
    def __init__(self, output: Union[IOutput, None] = None):
        self._output = output if output is not None else ConsoleOutput()

    @property
    def output(self) -> IOutput:
        return self._output

    def send_email(self, user: Addressable, message: str) -> None:
        logger.debug("emailing %s", user.email)
        self._output.write(EMAIL_SENT.format(email=user.email, message=message))

    def send_welcome_email(self, user: Addressable) -> None:
        logger.debug("welcoming %s", user.email)
        self._output.write(WELCOME_EMAIL_SENT.format(email=user.email))

    def send_password_reset_email(self, user: Addressable) -> None:
        logger.debug("password reset for %s", user.email)
        self._output.write(PASSWORD_RESET_EMAIL_SENT.format(email=user.email))
