# FPE 默认配置
FPE_CONFIG = {
    'radix': 10,              # 默认基数，十进制数值型字符串
    'algorithm': 'AES',       # 分组密码算法：AES / SM4
    'num_rounds': 8,          # FF3 固定 8 轮 Feistel
    'domain_min': 100,        # 最小域大小：radix^minLen >= 100
    'max_domain_bits': 96,    # 每一半的域大小上限：2^96
    'log_level': 'INFO',      # 日志级别
    'log_max_bytes': 10 ** 6, # 日志文件大小限制为1MB
    'log_backup_count': 1     # 最多保留1个备份
}
