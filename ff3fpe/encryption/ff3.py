import logging

from ff3fpe.common.hex_utils import hex_to_bytes
from ff3fpe.config.fpe_config import FPE_CONFIG
from ff3fpe.encryption.block_cipher import new_block_cipher
from ff3fpe.encryption.errors import (
    DomainTooSmallError, InvalidInputLengthError, InvalidKeyLengthError, InvalidTweakLengthError
)
from ff3fpe.encryption.numeral import alphabet_for, decode_in_radix, encode_in_radix, reverse_string
from ff3fpe.encryption.round_function import HALF_TWEAK_LEN, reverse_bytes, round_output


logger = logging.getLogger(__name__)


def min_length(radix, domain_min=FPE_CONFIG['domain_min']):
    """ 满足 radix^minLen >= domain_min 的最小长度 """
    n = 1
    while radix ** n < domain_min:
        n += 1
    return n


def max_length(radix, max_bits=FPE_CONFIG['max_domain_bits']):
    """ 2 * floor(log<radix>(2^96))：每一半的域大小都不超过 2^96 """
    half = 0
    while radix ** (half + 1) <= 2 ** max_bits:
        half += 1
    return 2 * half


class FF3Cipher:
    """ Class FF3Cipher implements FF3 over radix 2..36 numeral strings """

    NUM_ROUNDS = FPE_CONFIG['num_rounds']
    KEY_LENGTHS = (16, 24, 32)
    TWEAK_LEN = 8
    DOMAIN_MIN = FPE_CONFIG['domain_min']  # radix^minLen >= DOMAIN_MIN

    def __init__(self, key, tweak, radix=FPE_CONFIG['radix'], algorithm=FPE_CONFIG['algorithm']):
        """
        Args:
            key: 16, 24 or 32 bytes
            tweak: 8 bytes
            radix: numeral base, 2..36
            algorithm: block cipher behind the round function, 'AES' or 'SM4'
        """
        self.alphabet = alphabet_for(radix)
        self.radix = radix

        if len(key) not in self.KEY_LENGTHS:
            raise InvalidKeyLengthError(f"key length is {len(key)} bytes but must be 128, 192, or 256 bits")

        if len(tweak) != self.TWEAK_LEN:
            raise InvalidTweakLengthError(f"tweak length is {len(tweak)} bytes but must be {self.TWEAK_LEN * 8} bits")

        self.min_len = min_length(radix, self.DOMAIN_MIN)
        self.max_len = max_length(radix)

        # 确保 2 <= minLen <= maxLen
        if self.min_len < 2 or self.max_len < self.min_len:
            raise DomainTooSmallError(f"minLen {self.min_len} or maxLen {self.max_len} invalid, adjust your radix")

        self.key = bytes(key)
        self.tweak = bytes(tweak)
        self.algorithm = algorithm.upper()

        # FF3 使用字节逆序后的密钥
        self.block_cipher = new_block_cipher(self.algorithm, reverse_bytes(self.key))

    # 工厂方法：由十六进制字符串形式的 key / tweak 创建 FF3Cipher
    @classmethod
    def from_hex(cls, key, tweak, radix=FPE_CONFIG['radix'], algorithm=FPE_CONFIG['algorithm']):
        return cls(hex_to_bytes(key), hex_to_bytes(tweak), radix, algorithm)

    """
    Feistel structure

            u length |  v length
            A block  |  B block

                C <- modulo function

            B' <- C  |  A' <- B


    Steps:
    Let u = [n/2]
    Let v = n - u
    Let A = X[1..u]
    Let B = X[u+1,n]
    Let T(L) = T[0..31] and T(R) = T[32..63]
    for i <- 0..7 do
        If is even, let m = u and W = T(R) Else let m = v and W = T(L)
        Let P = W xor [i]^4 || [NUM<radix>(REV(B))]^12
        Let S = REVB(CIPH<REVB(K)>(REVB(P)))
        Let y = NUM(S)
        Let c = (NUM<radix>(REV(A)) + y) mod radix^m
        Let C = REV(STR<radix>^m(c))
        Let A = B
        Let B = C
    end for
    Return A || B

    See NIST SP 800-38G and the FF3 samples:

    https://nvlpubs.nist.gov/nistpubs/SpecialPublications/NIST.SP.800-38G.pdf
    https://csrc.nist.gov/CSRC/media/Projects/Cryptographic-Standards-and-Guidelines/documents/examples/FF3samples.pdf
    """

    def encrypt(self, plaintext):
        """ Encrypts a numeral string, returning a ciphertext of the same length and radix """
        A, B, u, v = self._prepare(plaintext)
        tweak_left, tweak_right = self._split_tweak()
        mod_u, mod_v = self.radix ** u, self.radix ** v

        logger.debug(f"encrypt... radix={self.radix}, u={u}, v={v}")

        for i in range(self.NUM_ROUNDS):
            if i % 2 == 0:
                m, W, modulus = u, tweak_right, mod_u
            else:
                m, W, modulus = v, tweak_left, mod_v

            y = round_output(self.block_cipher, i, self.radix, W, B)
            c = (decode_in_radix(reverse_string(A), self.radix) + y) % modulus
            C = reverse_string(encode_in_radix(c, self.radix, m))

            A, B = B, C
            logger.debug(f"round {i}: A={A}, B={B}")

        return A + B

    def decrypt(self, ciphertext):
        """
        Decrypts a numeral string, returning a plaintext of the same length and radix.

        Same rounds as encrypt, run from 7 down to 0, with the modular
        addition replaced by subtraction.
        """
        A, B, u, v = self._prepare(ciphertext)
        tweak_left, tweak_right = self._split_tweak()
        mod_u, mod_v = self.radix ** u, self.radix ** v

        logger.debug(f"decrypt... radix={self.radix}, u={u}, v={v}")

        for i in reversed(range(self.NUM_ROUNDS)):
            if i % 2 == 0:
                m, W, modulus = u, tweak_right, mod_u
            else:
                m, W, modulus = v, tweak_left, mod_v

            y = round_output(self.block_cipher, i, self.radix, W, A)
            c = (decode_in_radix(reverse_string(B), self.radix) - y) % modulus
            C = reverse_string(encode_in_radix(c, self.radix, m))

            B, A = A, C
            logger.debug(f"round {i}: A={A}, B={B}")

        return A + B

    def _prepare(self, text):
        """ 长度、字符检查后，将字符串分为左右两部分：len(A) = ceil(n/2) >= len(B) """
        n = len(text)
        if n < self.min_len or n > self.max_len:
            raise InvalidInputLengthError(
                f"message length {n} is not within min {self.min_len} and max {self.max_len} bounds")

        # raises InvalidDigitError before any round runs
        decode_in_radix(text, self.radix)

        text = text.lower()
        u = (n + 1) // 2
        v = n - u
        return text[:u], text[u:], u, v

    def _split_tweak(self):
        return self.tweak[:HALF_TWEAK_LEN], self.tweak[HALF_TWEAK_LEN:]
