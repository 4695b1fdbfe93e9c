from .logging_utils import setup_logging, get_logger

__all__ = ["setup_logging", "get_logger"]
