import operator
from typing import Any

from . import hotp, totp, utils


class Authenticator(object):
    """
    An immutable shared secret and code length for HOTP and TOTP codes.
    """

    __slots__ = ("_secret", "_digits")

    def __init__(self, secret: bytes, digits: int = utils.DEFAULT_DIGITS) -> None:
        """
        :param secret: the raw shared secret
        :param digits: number of digits in generated codes. Not validated;
            values above 9 no longer fit the 32-bit modulus.
        """
        if isinstance(secret, int):
            raise TypeError("secret must be bytes, not int")
        object.__setattr__(self, "_secret", bytes(secret))
        object.__setattr__(self, "_digits", operator.index(digits))

    @classmethod
    def from_base32(cls, encoded_secret: str, digits: int = utils.DEFAULT_DIGITS) -> "Authenticator":
        """
        :param encoded_secret: the secret as unpadded base32
        :raises InvalidSecret: when the secret does not decode
        """
        return cls(utils.decode_base32(encoded_secret), digits)

    @classmethod
    def from_token_url(cls, token: str) -> "Authenticator":
        """
        Builds an Authenticator from an ``otpauth://`` provisioning URL.

        :raises InvalidTokenURL: the URL is malformed
        :raises InvalidDigits: ``digits`` is unparseable or not within 6-9
        :raises InvalidSecret: ``secret`` is missing, empty or not base32
        """
        secret, digits = utils.parse_uri(token)
        return cls.from_base32(secret, digits)

    @property
    def secret(self) -> bytes:
        return self._secret

    @property
    def digits(self) -> int:
        return self._digits

    def generate_hotp(self, counter: int) -> int:
        """
        Generates the code for the given counter.

        :param counter: the OTP HMAC counter, an unsigned 64-bit integer
        :returns: code in ``[0, 10**digits)``, not zero padded
        """
        return hotp.generate_hotp(self._secret, counter, self._digits)

    def generate_totp(self) -> int:
        """
        Generates the code for the current 30 second time step.
        """
        return totp.generate_totp(self._secret, self._digits)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Authenticator is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Authenticator is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Authenticator):
            return NotImplemented
        return (self._secret, self._digits) == (other._secret, other._digits)

    def __hash__(self) -> int:
        return hash((self._secret, self._digits))

    def __repr__(self) -> str:
        # Never show the secret
        return "Authenticator(digits={})".format(self._digits)
