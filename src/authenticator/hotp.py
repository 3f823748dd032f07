import hashlib
import hmac

MAX_COUNTER = (1 << 64) - 1

# 10**digits is computed in 32-bit unsigned arithmetic and wraps.
_MODULUS_MASK = (1 << 32) - 1


def int_to_bytestring(i: int, padding: int = 8) -> bytes:
    """
    Turns an integer to the OATH specified
    bytestring, which is fed to the HMAC
    along with the secret
    """
    if i < 0 or i > MAX_COUNTER:
        raise ValueError("counter must be an unsigned 64-bit integer")
    return i.to_bytes(padding, byteorder="big")


def truncate(digest: bytes) -> int:
    """
    Dynamic truncation from RFC 4226 section 5.3.

    The low nibble of the last digest byte selects a 4-byte window, read
    big-endian with the sign bit cleared.
    """
    offset = digest[-1] & 0x0F
    return int.from_bytes(digest[offset : offset + 4], byteorder="big") & 0x7FFFFFFF


def modulus(digits: int) -> int:
    return pow(10, digits, _MODULUS_MASK + 1)


def generate_hotp(secret: bytes, counter: int, digits: int) -> int:
    """
    :param secret: raw shared secret
    :param counter: the HMAC counter value, 0 <= counter < 2**64
    :param digits: number of decimal digits kept from the truncated value
    :returns: the code as an integer; callers zero-pad it for display
    """
    # Implements RFC 4226, always with SHA-1
    hasher = hmac.new(secret, int_to_bytestring(counter), hashlib.sha1)
    code = truncate(hasher.digest())
    mod = modulus(digits)
    if mod == 0:
        # 10**digits wrapped to zero, nothing to reduce by
        return code
    return code % mod
