"""
================================================================================
Step Logger
================================================================================

Console tracing for test execution, built on loguru.

Each call emits exactly one line:

    [14:03:22.481] [STEP 2] Enter password

with the timestamp in local time. Info, success, debug, step and banner lines
go to stdout, warnings and errors go to stderr (sinks are installed by
`autotest_tools.common.init_logger`). Calls never raise and hold no state.

Usage:
    from testsuites.ui_testing.framework import step_logger as log

    log.test_start("valid login")
    log.step(1, "Enter username")
    log.success("Logged in")
    log.test_end("PASSED")

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from loguru import logger

from autotest_tools.common import init_logger

init_logger()

BANNER_WIDTH = 40
SEPARATOR_CHAR = "━"
BANNER_CHAR = "═"


def _emit(level: str, tag: str, message: object) -> None:
    try:
        logger.bind(tag=tag).log(level, str(message))
    except Exception:
        pass


def info(message: str) -> None:
    _emit("INFO", "INFO", message)


def warn(message: str) -> None:
    _emit("WARNING", "WARN", message)


def error(message: str) -> None:
    _emit("ERROR", "ERROR", message)


def success(message: str) -> None:
    _emit("SUCCESS", "SUCCESS", message)


def debug(message: str) -> None:
    _emit("DEBUG", "DEBUG", message)


def step(number: int, description: str) -> None:
    """Log a numbered test step."""
    _emit("STEP", f"STEP {number}", description)


def test_start(test_name: str) -> None:
    """Log the opening banner of a test case."""
    _emit("TEST", "TEST", f"{BANNER_CHAR * 3} START: {test_name} {BANNER_CHAR * 3}")


def test_end(status: str) -> None:
    """
    Log the closing banner of a test case.

    Args:
        status: "PASSED" or "FAILED".
    """
    level = "TEST" if status == "PASSED" else "TEST_FAILED"
    rule = BANNER_CHAR * ((BANNER_WIDTH - len(status) - 6) // 2)
    _emit(level, "TEST", f"{rule} TEST {status} {rule}")


def separator(title: str = "") -> None:
    """Log a visual separator, optionally titled."""
    if title:
        line = f"{SEPARATOR_CHAR * 7} {title} {SEPARATOR_CHAR * 7}"
    else:
        line = SEPARATOR_CHAR * BANNER_WIDTH
    _emit("SEPARATOR", "----", line)


# Keep pytest from collecting the banner helper as a test
test_start.__test__ = False
test_end.__test__ = False


__all__ = [
    "info",
    "warn",
    "error",
    "success",
    "debug",
    "step",
    "test_start",
    "test_end",
    "separator",
]
