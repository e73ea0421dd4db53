"""Domain errors raised by the session bootstrap and the contact submission flow.

Each error carries the user-facing message shown on the contact form.
"""

from portfolio_site.utils.constants import ContactMessages


class PortfolioError(Exception):
    """Base class for errors raised by the portfolio services."""

    user_message = ContactMessages.GENERIC_ERROR.value

    def __init__(self, detail: str = None):
        super().__init__(detail or self.user_message)
        self.detail = detail or self.user_message


class ConfigMissing(PortfolioError):
    """Backend configuration is empty or malformed."""


class AuthFailure(PortfolioError):
    """Token exchange or anonymous sign-in failed."""


class BackendNotReady(PortfolioError):
    """A submission was attempted without a backend connection or session."""

    user_message = ContactMessages.BACKEND_NOT_READY.value


class ValidationError(PortfolioError):
    """A required contact field is empty."""

    user_message = ContactMessages.MISSING_FIELDS.value


class RemoteWriteFailure(PortfolioError):
    """Appending the message to the remote collection failed."""

    user_message = ContactMessages.SEND_FAILED.value
