"""
日誌與計時工具

函式庫預設不安裝任何 handler，交由使用者透過標準 logging 控制。

使用方式:
    from dictascore.utils.logger import get_logger, TimingContext

    logger = get_logger("aligner")
    with TimingContext("align", logger):
        ...

    # 開啟除錯輸出
    import logging
    logging.getLogger("dictascore").setLevel(logging.DEBUG)
"""

import logging
import time
from functools import wraps
from typing import Callable, Optional

ROOT_LOGGER_NAME = "dictascore"
DEFAULT_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

_root_logger = logging.getLogger(ROOT_LOGGER_NAME)
_root_logger.addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得子 logger

    Args:
        name: 子模組名稱 (例如 "engine")，None 時回傳根 logger

    Returns:
        logging.Logger: 名稱為 dictascore.<name> 的 logger
    """
    if not name:
        return _root_logger
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    設定根 logger 的輸出等級與 handler

    重複呼叫只會調整等級，不會重複加入 StreamHandler。
    """
    _root_logger.setLevel(level)
    has_stream = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.NullHandler)
        for h in _root_logger.handlers
    )
    if not has_stream:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        _root_logger.addHandler(handler)
    for handler in _root_logger.handlers:
        handler.setLevel(level)
    return _root_logger


def enable_debug_logging() -> logging.Logger:
    """開啟 DEBUG 等級輸出"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """只開啟計時相關的 DEBUG 輸出"""
    setup_logger(level=logging.INFO)
    timing_logger = get_logger("timing")
    timing_logger.setLevel(logging.DEBUG)
    for handler in _root_logger.handlers:
        handler.setLevel(logging.DEBUG)
    return timing_logger


class TimingContext:
    """
    計時 context manager

    Args:
        operation: 操作名稱
        logger: 輸出用 logger (預設為 dictascore.timing)
        level: 日誌等級
        callback: 計時回呼 (operation: str, elapsed: float) -> None
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger("timing")
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.3f} ms")
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    計時裝飾器

    範例:
        >>> @log_timing("tokenize")
        ... def tokenize(text):
        ...     return text.split()
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__

        @wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, level=level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
