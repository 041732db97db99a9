# Common utilities
from isoecies.common.config import Config as Config
from isoecies.common.crypto import CryptoUtils as CryptoUtils
from isoecies.common.logging_utils import setup_logger as setup_logger
from isoecies.common.logging_utils import setup_logging as setup_logging

__all__ = ["Config", "CryptoUtils", "setup_logger", "setup_logging"]
