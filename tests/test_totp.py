import datetime
import unittest
from unittest import mock

from authenticator import DEFAULT_PERIOD, Authenticator
from authenticator import totp

RFC6238_SECRET = b"12345678901234567890"


class TOTPTest(unittest.TestCase):
    def test_rfc6238_vectors(self):
        # RFC 6238 appendix B, SHA-1 rows
        vectors = [
            (59, 94287082),
            (1111111109, 7081804),
            (1111111111, 14050471),
            (1234567890, 89005924),
            (2000000000, 69279037),
            (20000000000, 65353130),
        ]
        auth = Authenticator(RFC6238_SECRET, 8)
        for now, code in vectors:
            with mock.patch("time.time", return_value=now + 0.5):
                self.assertEqual(auth.generate_totp(), code)

    def test_matches_hotp_for_current_step(self):
        auth = Authenticator(b"fakesecret", 6)
        with mock.patch("time.time", return_value=1700000000):
            self.assertEqual(auth.generate_totp(), auth.generate_hotp(1700000000 // 30))

    def test_step_boundaries(self):
        auth = Authenticator(b"fakesecret", 6)
        with mock.patch("time.time", return_value=29.9):
            self.assertEqual(auth.generate_totp(), 937044)
        with mock.patch("time.time", return_value=30):
            self.assertEqual(auth.generate_totp(), auth.generate_hotp(1))

    def test_reads_clock_every_call(self):
        auth = Authenticator(RFC6238_SECRET, 8)
        with mock.patch("time.time", side_effect=[59, 1111111109]) as clock:
            self.assertEqual(auth.generate_totp(), 94287082)
            self.assertEqual(auth.generate_totp(), 7081804)
        self.assertEqual(clock.call_count, 2)

    def test_clock_before_epoch(self):
        auth = Authenticator(b"fakesecret", 6)
        with mock.patch("time.time", return_value=-31):
            with self.assertRaises(RuntimeError):
                auth.generate_totp()

    def test_clock_just_before_epoch(self):
        with mock.patch("time.time", return_value=-0.5):
            with self.assertRaises(RuntimeError):
                totp.unix_time()
            with self.assertRaises(RuntimeError):
                Authenticator(b"fakesecret", 6).generate_totp()


class TimecodeTest(unittest.TestCase):
    def test_default_period(self):
        self.assertEqual(DEFAULT_PERIOD, 30)
        self.assertEqual(totp.timecode(0), 0)
        self.assertEqual(totp.timecode(59), 1)
        self.assertEqual(totp.timecode(60), 2)

    def test_custom_period(self):
        self.assertEqual(totp.timecode(59, period=60), 0)

    def test_datetime(self):
        when = datetime.datetime(2009, 2, 13, 23, 31, 30, tzinfo=datetime.timezone.utc)
        self.assertEqual(totp.timecode(when), 1234567890 // 30)

    def test_datetime_before_epoch(self):
        when = datetime.datetime(1960, 1, 1, tzinfo=datetime.timezone.utc)
        with self.assertRaises(RuntimeError):
            totp.timecode(when)

    def test_datetime_just_before_epoch(self):
        when = datetime.datetime(1969, 12, 31, 23, 59, 59, 500000, tzinfo=datetime.timezone.utc)
        with self.assertRaises(RuntimeError):
            totp.timecode(when)

    def test_now(self):
        with mock.patch("time.time", return_value=1234567890.7):
            self.assertEqual(totp.unix_time(), 1234567890)
            self.assertEqual(totp.timecode(), 41152263)


if __name__ == "__main__":
    unittest.main()
