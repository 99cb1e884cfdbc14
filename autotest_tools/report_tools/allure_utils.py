"""
================================================================================
Allure Report Utilities
================================================================================

This module provides utilities for enhancing Allure test reports with
run metadata, custom attachments, and report processing.

Features:
- Run metadata (environment.properties, executor.json, categories.json)
- Attachment helpers
- Report generation and summary through the allure CLI
- History management

================================================================================
"""

import json
import platform
import shutil
import subprocess
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import allure
from loguru import logger

from autotest_tools.common import get_config


# Categories are matched by Allure against result status and failure message
DEFAULT_CATEGORIES: List[Dict[str, Any]] = [
    {
        "name": "Timeouts",
        "matchedStatuses": ["failed", "broken"],
        "messageRegex": "(?s).*(did not appear within|did not match|timeout after).*",
    },
    {
        "name": "Locked out users",
        "matchedStatuses": ["failed"],
        "messageRegex": "(?s).*locked out.*",
    },
    {
        "name": "Product defects",
        "matchedStatuses": ["failed"],
    },
    {
        "name": "Test defects",
        "matchedStatuses": ["broken"],
    },
]


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_json(data: Any, name: str = "Data"):
    """
    Attach JSON data to Allure report.

    Args:
        data: Data to attach (will be JSON serialized)
        name: Attachment name
    """
    json_str = json.dumps(data, indent=2, default=str)
    allure.attach(
        json_str,
        name=name,
        attachment_type=allure.attachment_type.JSON
    )


# ================================================================================
# Run Metadata
# ================================================================================

def write_environment_properties(
    results_dir: Path,
    properties: Dict[str, Any],
) -> Path:
    """
    Write `environment.properties`, shown in the Environment widget.

    Args:
        results_dir: Allure results directory (created if missing)
        properties: Key/value pairs, written in insertion order

    Returns:
        Path to the written file
    """
    results_dir = Path(results_dir)
    results_dir.mkdir(parents=True, exist_ok=True)

    lines = []
    for key, value in properties.items():
        # Property keys cannot contain spaces or separators
        safe_key = str(key).replace(" ", "_").replace("=", "_").replace(":", "_")
        lines.append(f"{safe_key}={value}")

    path = results_dir / "environment.properties"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def write_executor_info(
    results_dir: Path,
    executor: Optional[Dict[str, Any]] = None,
) -> Path:
    """
    Write `executor.json` describing who/what ran the tests.

    Args:
        results_dir: Allure results directory (created if missing)
        executor: Executor fields; defaults to `reporting.executor` from config
    """
    results_dir = Path(results_dir)
    results_dir.mkdir(parents=True, exist_ok=True)

    if executor is None:
        executor = dict(get_config("reporting.executor", {}) or {})

    path = results_dir / "executor.json"
    path.write_text(json.dumps(executor, indent=2), encoding="utf-8")
    return path


def write_categories(
    results_dir: Path,
    categories: Optional[List[Dict[str, Any]]] = None,
) -> Path:
    """
    Write `categories.json` used by Allure to group failures.
    """
    results_dir = Path(results_dir)
    results_dir.mkdir(parents=True, exist_ok=True)

    path = results_dir / "categories.json"
    path.write_text(
        json.dumps(categories if categories is not None else DEFAULT_CATEGORIES, indent=2),
        encoding="utf-8",
    )
    return path


def build_environment_properties(browser: str, base_url: str) -> Dict[str, str]:
    """Environment widget content for a SauceDemo run."""
    return {
        "Environment": get_config("reporting.environment", "TEST"),
        "Browser": browser,
        "OS": platform.system(),
        "Application": get_config("reporting.application", "SauceDemo"),
        "Base_URL": base_url,
    }


def write_run_metadata(results_dir: Path, browser: str, base_url: str) -> None:
    """Write all three metadata files for one run."""
    write_environment_properties(results_dir, build_environment_properties(browser, base_url))
    write_executor_info(results_dir)
    write_categories(results_dir)
    logger.debug(f"Allure metadata written to {results_dir}")


# ================================================================================
# Report Processing
# ================================================================================

@dataclass
class TestResultSummary:
    """Summary of test execution results."""
    __test__ = False

    total: int = 0
    passed: int = 0
    failed: int = 0
    broken: int = 0
    skipped: int = 0
    unknown: int = 0
    duration_ms: int = 0
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def pass_rate(self) -> float:
        """Calculate pass rate percentage."""
        if self.total == 0:
            return 0.0
        return (self.passed / self.total) * 100

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "broken": self.broken,
            "skipped": self.skipped,
            "unknown": self.unknown,
            "pass_rate": f"{self.pass_rate:.2f}%",
            "duration_ms": self.duration_ms,
            "timestamp": self.timestamp,
        }


class AllureReportProcessor:
    """
    Processes Allure results and generates reports.

    Provides methods for analyzing results, generating summaries,
    and managing report history.
    """

    def __init__(
        self,
        results_dir: Path,
        report_dir: Optional[Path] = None,
    ):
        """
        Initialize processor.

        Args:
            results_dir: Allure results directory
            report_dir: Output report directory
        """
        self.results_dir = Path(results_dir)
        self.report_dir = Path(report_dir or self.results_dir.parent / "allure-report")

    def parse_results(self) -> List[Dict[str, Any]]:
        """
        Parse Allure result files.

        Returns:
            List of test result dictionaries
        """
        results = []

        for result_file in self.results_dir.glob("*-result.json"):
            try:
                with open(result_file, encoding="utf-8") as f:
                    results.append(json.load(f))
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to parse {result_file}: {e}")

        return results

    def generate_summary(self) -> TestResultSummary:
        """
        Generate summary from results.

        Returns:
            TestResultSummary object
        """
        results = self.parse_results()
        summary = TestResultSummary()
        summary.total = len(results)

        for result in results:
            status = result.get("status", "unknown")
            if status == "passed":
                summary.passed += 1
            elif status == "failed":
                summary.failed += 1
            elif status == "broken":
                summary.broken += 1
            elif status == "skipped":
                summary.skipped += 1
            else:
                summary.unknown += 1

            summary.duration_ms += result.get("stop", 0) - result.get("start", 0)

        return summary

    def copy_history(self):
        """Copy history from previous report to results."""
        history_source = self.report_dir / "history"
        history_dest = self.results_dir / "history"

        if history_source.exists():
            if history_dest.exists():
                shutil.rmtree(history_dest)
            shutil.copytree(history_source, history_dest)
            logger.info("Copied history from previous report")

    def generate_report(self) -> bool:
        """
        Generate Allure HTML report.

        Returns:
            True if successful
        """
        self.copy_history()

        cmd = [
            "allure", "generate",
            str(self.results_dir),
            "-o", str(self.report_dir),
            "--clean"
        ]

        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except FileNotFoundError:
            logger.warning("Allure CLI not found. Please install Allure to generate reports.")
            return False

        if result.returncode != 0:
            logger.error(f"Report generation failed: {result.stderr}")
            return False

        logger.info(f"Report generated at {self.report_dir}")
        return True

    def print_summary(self):
        """Log a summary of the run."""
        summary = self.generate_summary()

        logger.info("=" * 60)
        logger.info("TEST EXECUTION SUMMARY")
        logger.info("=" * 60)
        logger.info(f"Total Tests:    {summary.total}")
        logger.info(f"Passed:         {summary.passed}")
        logger.info(f"Failed:         {summary.failed}")
        logger.info(f"Broken:         {summary.broken}")
        logger.info(f"Skipped:        {summary.skipped}")
        logger.info(f"Pass Rate:      {summary.pass_rate:.2f}%")
        logger.info(f"Duration:       {summary.duration_ms / 1000:.2f}s")
        logger.info("=" * 60)


# ================================================================================
# Convenience Functions
# ================================================================================

def generate_allure_report(
    results_dir: str,
    output_dir: Optional[str] = None,
) -> bool:
    """
    Generate Allure report from results and log the summary.

    Args:
        results_dir: Path to allure-results directory
        output_dir: Optional output directory

    Returns:
        True if successful
    """
    processor = AllureReportProcessor(
        Path(results_dir),
        Path(output_dir) if output_dir else None
    )

    success = processor.generate_report()
    if success:
        processor.print_summary()

    return success
