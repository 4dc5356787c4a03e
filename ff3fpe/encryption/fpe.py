import logging
import string

from ff3fpe.config.fpe_config import FPE_CONFIG
from ff3fpe.encryption.ff3 import FF3Cipher


logger = logging.getLogger(__name__)


# FPE-AES/SM4 (FF3-8轮)
class FPE:
    def __init__(self, key, tweak, algorithm=FPE_CONFIG['algorithm'], radix=FPE_CONFIG['radix']):
        """ key / tweak 为十六进制字符串 """
        self.key = key
        self.tweak = tweak
        self.radix = radix
        self.algorithm = algorithm.upper()

        self.cipher = FF3Cipher.from_hex(self.key, self.tweak, self.radix, self.algorithm)
        logger.debug(f"FPE ready: algorithm={self.algorithm}, radix={self.radix}")

    def encrypt(self, message):
        return self.cipher.encrypt(message)

    def decrypt(self, ciphertext):
        return self.cipher.decrypt(ciphertext)

    # 工厂方法：根据样本消息选择 radix，纯数字用十进制，其余用 0-9a-z
    # 密文可能全为数字，因此同一个 FPE 对象用于加密和解密，不要按密文重新选择
    @staticmethod
    def for_message(key, tweak, message, algorithm=FPE_CONFIG['algorithm']):
        if message and all(char in string.digits for char in message):
            radix = 10
        else:
            radix = 36
        return FPE(key, tweak, algorithm, radix)
