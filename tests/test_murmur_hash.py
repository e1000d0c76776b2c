import unittest
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import numpy as np

from murmur_hash import fmix32, hash_string, murmur3_32, random_seed, rotl32


class TestMurmurHashReferenceVectors(unittest.TestCase):
    def test_empty_input(self):
        self.assertEqual(murmur3_32(b"", 0), 0)
        self.assertEqual(murmur3_32(b"", 1), 0x514E28B7)
        self.assertEqual(murmur3_32(b"", 0xFFFFFFFF), 0x81F16F39)

    def test_single_block(self):
        self.assertEqual(murmur3_32(b"\x00\x00\x00\x00", 0), 0x2362F9DE)
        self.assertEqual(murmur3_32(b"\xff\xff\xff\xff", 0), 0x76293B50)
        self.assertEqual(murmur3_32(b"\x21\x43\x65\x87", 0), 0xF55B516B)
        self.assertEqual(murmur3_32(b"\x21\x43\x65\x87", 0x5082EDEE), 0x2362F9DE)

    def test_tail_lengths(self):
        self.assertEqual(murmur3_32(b"\x21\x43\x65", 0), 0x7E4A8634)
        self.assertEqual(murmur3_32(b"\x21\x43", 0), 0xA0F7B07A)
        self.assertEqual(murmur3_32(b"\x21", 0), 0x72661CF4)
        self.assertEqual(murmur3_32(b"\x00\x00\x00", 0), 0x85F0B427)
        self.assertEqual(murmur3_32(b"\x00\x00", 0), 0x30F4C306)
        self.assertEqual(murmur3_32(b"\x00", 0), 0x514E28B7)

    def test_strings(self):
        self.assertEqual(hash_string("aaaa", 0x9747B28C), 0x5A97808A)
        self.assertEqual(hash_string("abc", 0), 0xB3DD93FA)
        self.assertEqual(hash_string("Hello, world!", 0x9747B28C), 0x24884CBA)
        self.assertEqual(
            hash_string("The quick brown fox jumps over the lazy dog", 0x9747B28C),
            0x2FA826CD,
        )


class TestMurmurHashProperties(unittest.TestCase):
    def test_deterministic_for_fixed_seed(self):
        for word in ["a", "word", "longer words here", "café"]:
            self.assertEqual(hash_string(word, 12345), hash_string(word, 12345))

    def test_result_is_unsigned_32_bit_int(self):
        for i in range(200):
            h = hash_string(f"key{i}", 0xDEADBEEF)
            self.assertIsInstance(h, int)
            self.assertGreaterEqual(h, 0)
            self.assertLess(h, 2**32)

    def test_seed_changes_hash(self):
        self.assertNotEqual(hash_string("hello", 1), hash_string("hello", 2))

    def test_single_bit_flip_changes_many_output_bits(self):
        base = murmur3_32(b"abcdefgh", 7)
        flipped = murmur3_32(b"abcdefgi", 7)
        self.assertGreater(bin(base ^ flipped).count("1"), 4)

    def test_hash_string_uses_utf8(self):
        self.assertEqual(hash_string("été", 3), murmur3_32("été".encode("utf-8"), 3))

    def test_seed_out_of_range_raises(self):
        with self.assertRaises(ValueError):
            murmur3_32(b"abc", -1)
        with self.assertRaises(ValueError):
            murmur3_32(b"abc", 2**32)

    def test_no_overflow_warning(self):
        with np.errstate(all="raise"):
            murmur3_32(b"overflowing multiplication", 0xFFFFFFFF)


class TestMurmurHashHelpers(unittest.TestCase):
    def test_rotl32(self):
        self.assertEqual(int(rotl32(np.uint32(1), 1)), 2)
        self.assertEqual(int(rotl32(np.uint32(0x80000000), 1)), 1)
        self.assertEqual(int(rotl32(np.uint32(0x12345678), 8)), 0x34567812)

    def test_rotl32_on_array(self):
        result = rotl32(np.array([1, 0x80000000], dtype=np.uint32), 4)
        np.testing.assert_array_equal(result, np.array([0x10, 0x8], dtype=np.uint32))

    def test_fmix32_fixed_point_zero(self):
        self.assertEqual(int(fmix32(0)), 0)

    def test_fmix32_one(self):
        self.assertEqual(int(fmix32(1)), 0x514E28B7)

    def test_random_seed_range(self):
        rng = np.random.default_rng(42)
        for _ in range(100):
            seed = random_seed(rng)
            self.assertGreaterEqual(seed, 0)
            self.assertLess(seed, 2**32)

    def test_random_seed_reproducible_with_rng(self):
        a = random_seed(np.random.default_rng(7))
        b = random_seed(np.random.default_rng(7))
        self.assertEqual(a, b)


if __name__ == "__main__":
    unittest.main()
