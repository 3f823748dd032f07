import datetime
import logging
import time
from typing import Optional, Union

from . import hotp

logger = logging.getLogger(__name__)

# RFC 6238 default step, in seconds
DEFAULT_PERIOD = 30


def unix_time() -> int:
    """
    Whole seconds since the Unix epoch, read from the system clock.
    """
    now = time.time()
    if now < 0:
        raise RuntimeError("system clock reports a time before the Unix epoch")
    return int(now)


def timecode(for_time: Optional[Union[int, datetime.datetime]] = None, period: int = DEFAULT_PERIOD) -> int:
    """
    Derives the HOTP counter for a point in time.

    :param for_time: seconds since the epoch or a datetime; defaults to now
    :param period: length of a time step in seconds
    :returns: the time step containing ``for_time``
    """
    if for_time is None:
        for_time = unix_time()
    elif isinstance(for_time, datetime.datetime):
        timestamp = for_time.timestamp()
        if timestamp < 0:
            raise RuntimeError("time is before the Unix epoch")
        for_time = int(timestamp)
    return for_time // period


def generate_totp(secret: bytes, digits: int) -> int:
    """
    Generates the code for the current time step.
    """
    counter = timecode()
    logger.debug("Derived TOTP step %d", counter)
    return hotp.generate_hotp(secret, counter, digits)
