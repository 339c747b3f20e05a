"""Login / sign-up form state, independent of how it is rendered."""
import logging
from dataclasses import dataclass

from account_service.client.api import AccountApi

logger = logging.getLogger(__name__)

LOGIN = "login"
SIGNUP = "signup"

LOGGED_IN_VIEW = "/loggedin"
SIGNED_UP_VIEW = "/signedup"

_CONFIRMATIONS = {
    LOGGED_IN_VIEW: "{email} Logged in Successfully!",
    SIGNED_UP_VIEW: "{email} Signed Up Successfully!",
}


@dataclass
class Navigation:
    view: str
    email: str


def confirmation_text(view: str, email: str | None = None) -> str:
    return _CONFIRMATIONS[view].format(email=email or "User")


class AccountForm:
    def __init__(self, api: AccountApi):
        self.api = api
        self.mode = LOGIN
        self.username = ""
        self.email = ""
        self.password = ""
        self.message = ""

    def switch_mode(self, mode: str) -> None:
        if mode not in (LOGIN, SIGNUP):
            raise ValueError(f"Unknown form mode: {mode}")
        self.mode = mode
        self.message = ""

    def _clear(self) -> None:
        self.username = ""
        self.email = ""
        self.password = ""
        self.message = ""

    def submit(self) -> Navigation | None:
        """Send the form for the current mode.

        Returns where to navigate on success. On failure returns None and
        leaves the message to show in ``self.message``.
        """
        if self.mode == LOGIN:
            result = self.api.login(self.email, self.password)
            view = LOGGED_IN_VIEW
        else:
            result = self.api.signup(self.username, self.email, self.password)
            view = SIGNED_UP_VIEW

        if not result.ok:
            logger.warning("%s request failed: %s", self.mode, result.message)
            self.message = result.message
            return None

        navigation = Navigation(view=view, email=self.email)
        self._clear()
        return navigation
