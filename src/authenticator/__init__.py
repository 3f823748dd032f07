"""
HOTP (RFC 4226) and TOTP (RFC 6238) codes from a shared secret.

    >>> auth = Authenticator.from_base32("MZQWWZLTMVRXEZLU", 6)
    >>> auth.generate_hotp(0)
    937044
"""

from .errors import AuthenticatorError as AuthenticatorError
from .errors import InvalidDigits as InvalidDigits
from .errors import InvalidSecret as InvalidSecret
from .errors import InvalidTokenURL as InvalidTokenURL
from .otp import Authenticator as Authenticator
from .totp import DEFAULT_PERIOD as DEFAULT_PERIOD
from .utils import DEFAULT_DIGITS as DEFAULT_DIGITS
from .utils import parse_uri as parse_uri

__all__ = [
    "Authenticator",
    "AuthenticatorError",
    "InvalidDigits",
    "InvalidSecret",
    "InvalidTokenURL",
    "DEFAULT_DIGITS",
    "DEFAULT_PERIOD",
    "parse_uri",
]
