"""
BAD: `User` holds user data, stores users, and sends emails.

Changing how users are stored or how emails are sent both mean editing
this one class, and a bug in one of them can break the other.
`good.py` splits it into `User`, `UserRepository` and `EmailService`.
"""

from typing import Union

from ...config import (
    EMAIL_SENT,
    PASSWORD_RESET_EMAIL_SENT,
    USER_DELETED,
    USER_SAVED,
    USER_UPDATED,
    WELCOME_EMAIL_SENT,
)

MaybeUser = Union["User", None]


class User:
    def __init__(self, name: str, email: str):
        self.name = name
        self.email = email

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, email={self.email!r})"

    # =============== persistence ===============

    def save_to_database(self, user: MaybeUser = None) -> None:
        print(USER_SAVED)

    def update_user(self, user: MaybeUser = None) -> None:
        user = user or self
        print(USER_UPDATED.format(name=user.name))

    def delete_user(self, user: MaybeUser = None) -> None:
        user = user or self
        print(USER_DELETED.format(name=user.name))

    # =============== email ===============

    def send_email(self, user: MaybeUser, message: str) -> None:
        user = user or self
        print(EMAIL_SENT.format(email=user.email, message=message))

    def send_welcome_email(self, user: MaybeUser = None) -> None:
        user = user or self
        print(WELCOME_EMAIL_SENT.format(email=user.email))

    def send_password_reset_email(self, user: MaybeUser = None) -> None:
        user = user or self
        print(PASSWORD_RESET_EMAIL_SENT.format(email=user.email))
