# --- START OF FILE utils/__init__.py ---

from .logging_utils import log_debug, log_info, log_warning, log_error

__all__ = [
    'log_debug',
    'log_info',
    'log_warning',
    'log_error'
]
