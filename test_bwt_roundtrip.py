#!/usr/bin/env python

import logging
import random
import unittest

from pybwt import SentinelPolicy, decode, encode


class RoundTripTestCase(unittest.TestCase):
    """
    Feed sample sequences through encode() and decode() and check that
    the original comes back.
    """

    samples = [
        "",
        "A",
        "BANANA",
        "AABBCC",
        "THE QUICK BROWN FOX",
        "mississippi",
        "XXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXX",
        "abcabcabcabcabcabc",
        "tObeOrnOttObeOrtObeOrnOt",
    ]

    def test_vectors(self) -> None:
        self.assertEqual(encode("BANANA"), "ANNB$AA")
        self.assertEqual(decode("ANNB$AA"), "BANANA")
        self.assertEqual(encode(""), "$")
        self.assertEqual(decode("$"), "")
        self.assertEqual(decode(encode("AABBCC")), "AABBCC")
        self.assertEqual(decode(encode("THE QUICK BROWN FOX")), "THE QUICK BROWN FOX")

    def test_samples(self) -> None:
        for s in self.samples:
            with self.subTest(s=s):
                e = encode(s)
                self.assertEqual(len(e), len(s) + 1)
                d = decode(e)
                self.assertEqual(len(d), len(e) - 1)
                self.assertEqual(d, s)
                self.assertEqual(decode(encode(s, naive=True)), s)

    def test_repeated_blocks(self) -> None:
        """
        Exact multiples of one repeated string used to trip up LF walks
        that stop at the first cycle.
        """
        for s in ["X" * 255, "XY" * 255, "abc" * 100]:
            with self.subTest(n=len(s)):
                self.assertEqual(decode(encode(s)), s)

    def test_random_dna(self) -> None:
        rng = random.Random(1234)
        for n in (1, 2, 7, 64, 500):
            s = "".join(rng.choice("ACGT") for _ in range(n))
            with self.subTest(n=n):
                self.assertEqual(decode(encode(s)), s)

    def test_all_bytes(self) -> None:
        """
        Every byte value except the reserved one survives the round trip.
        """
        p = SentinelPolicy(0)
        data = bytes(range(1, 256)) * 3
        self.assertEqual(decode(encode(data, p), p), data)

    def test_random_bytes(self) -> None:
        p = SentinelPolicy(0)
        rng = random.Random(42)
        data = bytes(rng.randrange(1, 256) for _ in range(1000))
        self.assertEqual(decode(encode(data, p), p), data)

    def test_integer_symbols(self) -> None:
        seq = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5]
        p = SentinelPolicy(0)
        encoded = encode(seq, p)
        self.assertEqual(encoded.count(0), 1)
        self.assertEqual(decode(encoded, p), seq)

    def test_unicode(self) -> None:
        s = "über naïve façade"
        self.assertEqual(decode(encode(s)), s)


if __name__ == "__main__":  # pragma: no cover
    logging.basicConfig(level=logging.DEBUG)
    unittest.main()  # pragma: no cover
