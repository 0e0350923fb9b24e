import hashlib
import unittest

from utils.Errors import (AmountOverflowError, InsufficientDataError,
                          InvalidAssetIDFormatError, OutputError)
from utils.Utils import Utils


class TestUtils(unittest.TestCase):

    def test_int_to_buffer(self):
        self.assertEqual(Utils.int_to_buffer(1000), b'\x00\x00\x00\x00\x00\x00\x03\xe8')
        self.assertEqual(Utils.int_to_buffer(255, 1), b'\xff')
        self.assertEqual(Utils.int_to_buffer(0, 4), bytes(4))

    def test_int_to_buffer_overflow(self):
        with self.assertRaises(AmountOverflowError):
            Utils.int_to_buffer(256, 1)
        with self.assertRaises(AmountOverflowError):
            Utils.int_to_buffer(2 ** 64)
        with self.assertRaises(AmountOverflowError):
            Utils.int_to_buffer(-1)

    def test_buffer_to_int(self):
        self.assertEqual(Utils.buffer_to_int(b'\x00\x00\x00\x00\x00\x00\x03\xe8'), 1000)
        self.assertEqual(Utils.buffer_to_int(b'\xff' * 8), 2 ** 64 - 1)

    def test_copy_from(self):
        data = bytearray(b'abcdef')
        chunk = Utils.copy_from(data, 1, 4)
        self.assertEqual(chunk, b'bcd')
        self.assertIsInstance(chunk, bytes)
        with self.assertRaises(InsufficientDataError) as ctx:
            Utils.copy_from(data, 4, 8)
        self.assertEqual(ctx.exception.needed, 4)
        self.assertEqual(ctx.exception.available, 2)

    def test_b58(self):
        self.assertEqual(Utils.buffer_to_b58(b'\x00\x00\x01'), '112')
        self.assertEqual(Utils.b58_to_buffer('112'), b'\x00\x00\x01')

    def test_cb58_round_trip(self):
        payload = bytes(range(32))
        encoded = Utils.cb58_encode(payload)
        raw = Utils.b58_to_buffer(encoded)
        self.assertEqual(raw[-4:], hashlib.sha256(payload).digest()[-4:])
        self.assertEqual(Utils.cb58_decode(encoded), payload)
        self.assertEqual(Utils.string_to_assetid(encoded), payload)

    def test_cb58_bad_checksum(self):
        raw = bytearray(Utils.add_checksum(bytes(range(32))))
        raw[-1] ^= 0x01
        with self.assertRaises(InvalidAssetIDFormatError):
            Utils.cb58_decode(Utils.buffer_to_b58(bytes(raw)))

    def test_cb58_bad_alphabet(self):
        # '0', 'O', 'I' and 'l' are not in the base58 alphabet
        with self.assertRaises(InvalidAssetIDFormatError):
            Utils.cb58_decode('0OIl')
        with self.assertRaises(InvalidAssetIDFormatError):
            Utils.cb58_decode('')

    def test_errors_share_a_base(self):
        self.assertTrue(issubclass(AmountOverflowError, OutputError))
        self.assertEqual(AmountOverflowError('too big', value=3).msg, 'too big')


if __name__ == '__main__':
    unittest.main()
