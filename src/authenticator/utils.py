import base64
import binascii
import logging
import re
from typing import List, Optional, Tuple
from urllib.parse import SplitResult, parse_qsl, urlsplit

from .errors import InvalidDigits, InvalidSecret, InvalidTokenURL

logger = logging.getLogger(__name__)

DEFAULT_DIGITS = 6
MIN_DIGITS = 6
MAX_DIGITS = 9

# Remainders of len(text) % 8 that an unpadded RFC 4648 encoder never produces
_IMPOSSIBLE_BASE32_LENGTHS = (1, 3, 6)

_UNSIGNED_INT = re.compile(r"\+?[0-9]+")

# Characters a URL host may never contain
_FORBIDDEN_HOST_CHARS = frozenset("\x00\t\n\r <>[\\]^|")


def decode_base32(encoded: str) -> bytes:
    """
    Decodes unpadded RFC 4648 base32 text into the raw secret.

    Lowercase letters are accepted. ``=`` padding is not.

    :raises InvalidSecret: when the text is empty or does not decode
    """
    if not encoded:
        raise InvalidSecret("empty secret")
    if "=" in encoded:
        raise InvalidSecret("invalid encoded secret: padding is not accepted")
    if len(encoded) % 8 in _IMPOSSIBLE_BASE32_LENGTHS:
        raise InvalidSecret("invalid encoded secret: {} is not a valid base32 length".format(len(encoded)))

    # b32decode insists on full 8 character blocks
    padded = encoded + "=" * (-len(encoded) % 8)
    try:
        return base64.b32decode(padded, casefold=True)
    except (binascii.Error, ValueError) as err:
        raise InvalidSecret("invalid encoded secret") from err


def parse_digits(value: str) -> int:
    """
    Parses the ``digits`` query value as an unsigned 8-bit integer.

    No range check happens here, see :func:`parse_uri`.
    """
    if not value:
        raise InvalidDigits("cannot parse integer from empty string")
    if not _UNSIGNED_INT.fullmatch(value):
        raise InvalidDigits("invalid digit found in {!r}".format(value))
    digits = int(value)
    if digits > 0xFF:
        raise InvalidDigits("{} is too large for a code length".format(value))
    return digits


def split_url(url: str) -> SplitResult:
    """
    Splits an absolute URL, raising InvalidTokenURL when it is malformed.
    """
    try:
        parsed = urlsplit(url)
        if not parsed.scheme:
            raise ValueError("relative URL without a base")
        host = parsed.netloc.rpartition("@")[2]
        if not host.startswith("["):
            host = host.partition(":")[0]
            if any(c in _FORBIDDEN_HOST_CHARS or c.isspace() for c in host):
                raise ValueError("invalid domain character")
        # Port validation is lazy in urllib
        parsed.port
    except ValueError as err:
        logger.debug("Rejecting token URL: %s", err)
        raise InvalidTokenURL("invalid token url", cause=err) from err
    return parsed


#   otpauth://totp/ACME:alice@example.com?secret=MZQWWZLTMVRXEZLU&issuer=ACME&digits=8
#
#   Only ``secret`` and ``digits`` are read. ``algorithm`` and ``period`` are
#   ignored, codes are always HMAC-SHA1 over 30 second steps.


def parse_uri(uri: str) -> Tuple[str, int]:
    """
    Reads the base32 secret and the code length from a provisioning URL.

    See also:
        https://github.com/google/google-authenticator/wiki/Key-Uri-Format

    When a parameter is repeated the last occurrence wins.

    :param uri: the provisioning URL to parse
    :returns: ``(secret, digits)``, the secret still base32 encoded
    :raises InvalidTokenURL: the URL is malformed
    :raises InvalidDigits: ``digits`` is not an integer or is not within 6-9
    :raises InvalidSecret: ``secret`` is missing or empty
    """
    parsed_uri = split_url(uri)

    secret: Optional[str] = None
    digits = DEFAULT_DIGITS
    ignored: List[str] = []

    for key, value in parse_qsl(parsed_uri.query, keep_blank_values=True):
        if key == "digits":
            digits = parse_digits(value)
        elif key == "secret":
            secret = value
        else:
            ignored.append(key)

    if ignored:
        logger.debug("Ignoring token URL parameters: %s", ", ".join(ignored))

    if not MIN_DIGITS <= digits <= MAX_DIGITS:
        raise InvalidDigits(
            "{} is not valid digits for code length, must be between {}-{}".format(digits, MIN_DIGITS, MAX_DIGITS)
        )

    if not secret:
        raise InvalidSecret("empty secret")

    logger.debug("Parsed token URL with %d digit codes", digits)
    return secret, digits
