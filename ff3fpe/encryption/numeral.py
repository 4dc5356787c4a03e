import string

from ff3fpe.encryption.errors import InvalidDigitError, InvalidRadixError, NumeralOverflowError


BASE36 = string.digits + string.ascii_lowercase
RADIX_MIN = 2
RADIX_MAX = len(BASE36)


def alphabet_for(radix):
    """ radix 对应的字母表：0-9a-z 的前 radix 个字符 """
    if not isinstance(radix, int) or radix < RADIX_MIN or radix > RADIX_MAX:
        raise InvalidRadixError(f"radix must be between {RADIX_MIN} and {RADIX_MAX}, inclusive, but got {radix}")
    return BASE36[:radix]


def decode_in_radix(numeral, radix):
    """ 把 numeral 按 radix 进制转换为整数（高位在前），大小写不敏感 """
    alphabet = alphabet_for(radix)
    char_to_value = {char: i for i, char in enumerate(alphabet)}

    number = 0
    for char in numeral:
        value = char_to_value.get(char.lower())
        if value is None:
            raise InvalidDigitError(char, radix)
        number = number * radix + value

    return number


def encode_in_radix(value, radix, length):
    """ 将数字 value 转换为长 length、以 radix 为基的字符串，左侧补 0 """
    alphabet = alphabet_for(radix)
    if not (0 <= value < radix ** length):  # 范围检查
        raise NumeralOverflowError(f"value={value} is out of range [0, {radix}^{length})")

    result = [alphabet[0]] * length
    for i in range(length):
        value, digit = divmod(value, radix)
        result[length - 1 - i] = alphabet[digit]

    return ''.join(result)


def reverse_string(s):
    return s[::-1]
