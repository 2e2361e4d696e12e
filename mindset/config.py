from typing import Final

# =============== Message templates ===============

USER_SAVED: Final[str] = "User saved to database."
USER_UPDATED: Final[str] = "User {name} updated in the database."
USER_DELETED: Final[str] = "User {name} deleted from database."

EMAIL_SENT: Final[str] = "Sending email to {email}: {message}"
WELCOME_EMAIL_SENT: Final[str] = "Welcome email sent to {email}."
PASSWORD_RESET_EMAIL_SENT: Final[str] = "Password reset email sent to {email}."

# =============== Lessons ===============

DEMO_PRICE: Final[float] = 100
