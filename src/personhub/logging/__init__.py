from .logging import get_logger, reset_logger, get_configured_level

__all__ = ["get_logger", "reset_logger", "get_configured_level"]
