import logging
import sys
from typing import Optional


class NamespaceFilter(logging.Filter):
    def __init__(self, allowed_namespaces=None):
        super().__init__()
        self.allowed_namespaces = allowed_namespaces if allowed_namespaces is not None else []

    def filter(self, record):
        if not self.allowed_namespaces:
            return True  # If no namespaces are specified, allow all records
        # Allow record if its name starts with any of the allowed namespaces
        return any(record.name.startswith(ns) for ns in self.allowed_namespaces)


log_formatter = logging.Formatter(
    fmt="%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def configure_logging(
    level: str = "INFO", allowed_namespaces: Optional[list[str]] = None
) -> logging.Logger:
    """
    Attaches a stdout handler to the "relief_admin" logger.

    Modules log through logging.getLogger(__name__), so every logger under
    relief_admin.* inherits this handler and level. Calling this more than
    once replaces the handler instead of stacking duplicates.
    """
    app_logger = logging.getLogger("relief_admin")
    app_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    if allowed_namespaces:
        console_handler.addFilter(NamespaceFilter(allowed_namespaces))

    app_logger.handlers = [console_handler]
    return app_logger
