"""Outcomes of the account flows that are not a successful identity.

The flows raise these; ``account_service.utils.exceptions`` is the only place
that turns them into HTTP status codes.
"""


class AccountError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingCredentials(AccountError):
    def __init__(self):
        super().__init__("Email and password are required")


class DuplicateAccount(AccountError):
    def __init__(self, email: str):
        super().__init__(
            f"User already exists with the email {email}. "
            "Please try again with a different email."
        )
        self.email = email


class AccountNotFound(AccountError):
    def __init__(self, email: str):
        super().__init__(f"User with the email {email} is not signed up. Please sign up first!")
        self.email = email


class InvalidCredentials(AccountError):
    def __init__(self):
        super().__init__("Invalid Password")


class StorageUnavailable(AccountError):
    def __init__(self, action: str = "your request"):
        super().__init__(f"Something went wrong during {action}, please try again later!")
        self.action = action
