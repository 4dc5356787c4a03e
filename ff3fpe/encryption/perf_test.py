import random
import string
import time
import unittest

from ff3fpe.common.log_config import setup_logger
from ff3fpe.encryption.fpe import FPE


logger = setup_logger(__name__)


def timeit(f):
    def timed(*args, **kw):
        ts = time.time()
        result = f(*args, **kw)
        te = time.time()
        logger.info(f'func: {f.__name__} took: {te - ts:.4f} seconds.')
        return result
    return timed


class TestEncryptionPerformance(unittest.TestCase):
    def setUp(self):
        """ 初始化测试数据和加密密钥 """
        self.runs = 200
        rng = random.Random(0)
        self.messages = [''.join(rng.choices(string.digits, k=16)) for _ in range(self.runs)]
        self.key = "EF4359D8D580AA4F7F036D6F04FC6A94"
        self.tweak = "D8E7920AFA330A73"

    @timeit
    def test_ff3_aes_encryption(self):
        cipher = FPE(self.key, self.tweak, "AES")
        for message in self.messages:
            self.assertEqual(message, cipher.decrypt(cipher.encrypt(message)))

    @timeit
    def test_ff3_sm4_encryption(self):
        cipher = FPE(self.key, self.tweak, "SM4")
        for message in self.messages:
            self.assertEqual(message, cipher.decrypt(cipher.encrypt(message)))


if __name__ == '__main__':
    unittest.main()
