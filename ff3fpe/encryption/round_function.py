import logging

from ff3fpe.encryption.block_cipher import BLOCK_SIZE
from ff3fpe.encryption.errors import InvalidTweakLengthError
from ff3fpe.encryption.numeral import decode_in_radix, reverse_string


logger = logging.getLogger(__name__)

HALF_TWEAK_LEN = 4
NUMERAL_BYTES = BLOCK_SIZE - HALF_TWEAK_LEN  # 12 bytes, 96 bits


def reverse_bytes(data):
    return bytes(data[::-1])


def build_round_block(i, radix, W, half):
    """
    P = (W XOR [i]^4) || [NUM<radix>(REV(half))]^12

    The round index only touches the last byte of the tweak half, since i < 8.
    """
    if len(W) != HALF_TWEAK_LEN:
        raise InvalidTweakLengthError(f"round tweak must be {HALF_TWEAK_LEN} bytes, but got {len(W)}")

    head = bytes(W[:3]) + bytes([W[3] ^ i])
    value = decode_in_radix(reverse_string(half), radix)
    return head + value.to_bytes(NUMERAL_BYTES, byteorder='big')


def round_output(block_cipher, i, radix, W, half):
    """
    y = NUM<2>(REV(CIPH<REV(K)>(REV(P))))

    block_cipher must already be keyed with the byte-reversed key.
    """
    P = build_round_block(i, radix, W, half)
    S = reverse_bytes(block_cipher.encrypt_block(reverse_bytes(P)))
    y = int.from_bytes(S, byteorder='big')
    logger.debug(f"round {i}: P={P.hex()}, S={S.hex()}")
    return y
