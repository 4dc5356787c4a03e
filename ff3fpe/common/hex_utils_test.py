import unittest

from ff3fpe.common.hex_utils import bytes_to_hex, hex_to_bytes


class TestHexUtils(unittest.TestCase):
    def test_byte_array_utils(self):
        data = hex_to_bytes("BADA55")
        self.assertEqual(bytes([0xba, 0xda, 0x55]), data)
        self.assertEqual("BADA55", bytes_to_hex(data))
        self.assertEqual(data, hex_to_bytes("bada55"))

    def test_invalid_hex(self):
        self.assertRaises(ValueError, hex_to_bytes, "ABC")
        self.assertRaises(ValueError, hex_to_bytes, "ZZ")
        self.assertRaises(ValueError, hex_to_bytes, "AB CD")


if __name__ == '__main__':
    unittest.main()
