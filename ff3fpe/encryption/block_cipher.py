from Crypto.Cipher import AES
from gmssl.sm4 import CryptSM4, SM4_ENCRYPT

from ff3fpe.encryption.errors import InvalidKeyLengthError


BLOCK_SIZE = 16  # 128 bits


class BlockCipher:
    """ Single-block encryption under a fixed key, no padding and no chaining """

    name = None
    key_lengths = ()

    def __init__(self, key):
        if len(key) not in self.key_lengths:
            raise InvalidKeyLengthError(
                f"{self.name} key length is {len(key)} bytes but must be one of {self.key_lengths}")
        self.key = key

    def encrypt_block(self, block):
        if len(block) != BLOCK_SIZE:
            raise ValueError(f"block must be exactly {BLOCK_SIZE} bytes, but got {len(block)}")
        return self._encrypt_block(bytes(block))

    def _encrypt_block(self, block):
        raise NotImplementedError


class AESBlockCipher(BlockCipher):
    name = 'AES'
    key_lengths = (16, 24, 32)

    def __init__(self, key):
        super().__init__(key)
        self.cipher = AES.new(self.key, AES.MODE_ECB)

    def _encrypt_block(self, block):
        return self.cipher.encrypt(block)


class SM4BlockCipher(BlockCipher):
    name = 'SM4'
    key_lengths = (16,)

    def __init__(self, key):
        super().__init__(key)
        self.cipher = CryptSM4()
        self.cipher.set_key(self.key, SM4_ENCRYPT)

    def _encrypt_block(self, block):
        # 直接加密单个分组，不经过 crypt_ecb 的填充
        return bytes(self.cipher.one_round(self.cipher.sk, list(block)))


ALGORITHMS = {
    'AES': AESBlockCipher,
    'SM4': SM4BlockCipher,
}


def new_block_cipher(algorithm, key):
    algorithm = algorithm.upper()
    if algorithm not in ALGORITHMS:
        raise ValueError(f"Unsupported algorithm '{algorithm}'. Use one of {sorted(ALGORITHMS)}.")
    return ALGORITHMS[algorithm](key)
