"""
Logger module for serializable.

This module provides a centralized logger that can be imported throughout the serializable
package without causing circular import issues.
"""

import logging

# Module-level logger
logger: logging.Logger = logging.getLogger('serializable')
logger.setLevel(logging.WARNING)  # Default to WARNING level to avoid spam

def set_logger(custom_logger: logging.Logger) -> None:
    """Allow users to provide their own logger."""
    global logger
    logger = custom_logger

def get_logger() -> logging.Logger:
    """Return the logger currently in use. Prefer this over importing `logger` directly if set_logger() may be called."""
    return logger

def set_log_level(level: int) -> None:
    """Set the logging level for the package. 
    
    Args:
        level: logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, or logging.CRITICAL
    """
    logger.setLevel(level)
