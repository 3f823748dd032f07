from typing import Optional


class AuthenticatorError(ValueError):
    """
    Base class for errors raised while building an Authenticator.
    """


class InvalidDigits(AuthenticatorError):
    """
    The requested code length could not be parsed, or is not between 6 and 9.
    """


class InvalidSecret(AuthenticatorError):
    """
    The shared secret is missing, empty, or is not valid base32.
    """


class InvalidTokenURL(AuthenticatorError):
    """
    The provisioning URL is not a syntactically valid URL.

    The parse failure is chained as ``__cause__`` and kept on ``cause``.
    """

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.cause = cause

    def __str__(self) -> str:
        message = super().__str__()
        if self.cause is None:
            return message
        return "{0}: {1}".format(message, self.cause)
