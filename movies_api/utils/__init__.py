"""
Shared utilities package.

This package contains logging configuration shared across the application.
"""

from movies_api.utils.logging_config import setup_logging, configure_script_logging

__all__ = ['setup_logging', 'configure_script_logging']
