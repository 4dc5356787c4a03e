import string


# 十六进制字符串 --> 字节序列（用于 key / tweak）
def hex_to_bytes(hex_string):
    if len(hex_string) % 2 != 0:
        raise ValueError(f"hex string must have an even length, but got {len(hex_string)}")

    # bytes.fromhex 会忽略空白字符，这里不允许
    bad = [char for char in hex_string if char not in string.hexdigits]
    if bad:
        raise ValueError(f"'{bad[0]}' is not a hex digit")

    return bytes.fromhex(hex_string)


# 字节序列 --> 大写十六进制字符串
def bytes_to_hex(data):
    return data.hex().upper()
