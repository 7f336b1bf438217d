from .logger_config import get_logger, log_operation, setup_logger
from . import widget_assets

__all__ = ["get_logger", "log_operation", "setup_logger", "widget_assets"]
