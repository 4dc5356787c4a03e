import logging
from logging.handlers import RotatingFileHandler

from ff3fpe.config.fpe_config import FPE_CONFIG


FORMAT = '%(asctime)s - %(levelname)s - %(filename)s - line %(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(name='ff3fpe', log_file=None, level=None):
    """
    Attach a handler to the named logger and return it.

    Logs go to stderr, or to a rotating file when log_file is given. Calling
    it again for the same logger does not add a second handler.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level if level is not None else FPE_CONFIG['log_level'])

    if logger.handlers:
        return logger

    if log_file:
        # 文件大小限制为1MB，最多保留1个备份
        handler = RotatingFileHandler(filename=log_file,
                                      maxBytes=FPE_CONFIG['log_max_bytes'],
                                      backupCount=FPE_CONFIG['log_backup_count'])
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter(FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return logger
