"""
================================================================================
Autotest Tools Common Utilities
================================================================================

Shared configuration management and logging setup for the test tooling.

Exports:
    - get_config: Dot-path access to the YAML tools configuration
    - init_logger: Configure loguru with the console line format

Usage:
    from autotest_tools.common import get_config, init_logger

    init_logger()
    viewport = get_config("browser.viewport")

================================================================================
"""

from .global_config import (
    console_format,
    get_config,
    init_logger,
)

__all__ = [
    "console_format",
    "get_config",
    "init_logger",
]
