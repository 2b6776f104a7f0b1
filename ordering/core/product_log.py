"""
Product Log

Per-product log file opened when a product is created and closed
when it is disposed. Each product owns exactly one ProductLog.

Author: TM3
Date: 2026-10-19
"""
import logging
import re
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def safe_log_name(name: str) -> str:
    """
    Map a product name to a file-safe log file stem

    Examples:
        "Apple"        -> "Apple"
        "USB-C Cable"  -> "USB-C_Cable"
        "../etc"       -> "_etc"
    """
    stem = _UNSAFE_CHARS.sub("_", name).lstrip(".")
    return stem or "product"


class ProductLog:
    """
    Log handle backed by a logging.FileHandler

    The logger is created directly (not through logging.getLogger) so it
    is not kept alive by the logging manager after the product goes away.
    """

    def __init__(self, name: str, log_dir: Union[str, Path], encoding: str = "utf-8"):
        self.name = name
        self.path = Path(log_dir) / f"{safe_log_name(name)}.log"
        self.path.parent.mkdir(parents=True, exist_ok=True)

        self._handler: Optional[logging.FileHandler] = logging.FileHandler(
            self.path, mode="w", encoding=encoding
        )
        self._handler.setFormatter(logging.Formatter("%(asctime)s %(message)s"))

        self._logger = logging.Logger(f"ordering.product.{self.path.stem}")
        self._logger.propagate = False
        self._logger.addHandler(self._handler)

        logger.debug(f"Opened product log {self.path}")

    @property
    def closed(self) -> bool:
        return self._handler is None

    def write(self, message: str) -> None:
        """Append a line to the log file (ignored once closed)"""
        if self._handler is None:
            return
        self._logger.info(message)

    def close(self) -> None:
        """Flush and close the file; safe to call more than once"""
        if self._handler is None:
            return

        handler, self._handler = self._handler, None
        self._logger.removeHandler(handler)
        handler.close()
        logger.debug(f"Closed product log {self.path}")
