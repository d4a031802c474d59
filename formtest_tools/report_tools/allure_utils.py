"""
================================================================================
Allure Report Utilities
================================================================================

Attachments for form test steps, plus a small wrapper around the Allure CLI
that summarizes *-result.json files and builds the HTML report.

================================================================================
"""

import json
import subprocess
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import allure
from loguru import logger


# Values longer than this are shortened in form snapshots
FORM_VALUE_PREVIEW = 80


# ================================================================================
# Attachments
# ================================================================================

def attach_json(data: Any, name: str = "Data"):
    """Attach `data` serialized as pretty JSON."""
    allure.attach(
        json.dumps(data, indent=2, default=str, ensure_ascii=False),
        name=name,
        attachment_type=allure.attachment_type.JSON,
    )


def attach_text(text: str, name: str = "Text"):
    allure.attach(text, name=name, attachment_type=allure.attachment_type.TEXT)


def attach_form_values(values: Dict[str, Any], name: str = "Form Values"):
    """
    Attach what a test typed into the form.

    Strings over FORM_VALUE_PREVIEW characters are cut and annotated with
    their real length, so a 1000-character message does not flood the report.
    """
    preview = {}
    for key, value in values.items():
        if isinstance(value, str) and len(value) > FORM_VALUE_PREVIEW:
            value = f"{value[:FORM_VALUE_PREVIEW]}... ({len(value)} chars)"
        preview[key] = value
    attach_json(preview, name=name)


# ================================================================================
# Result Summary
# ================================================================================

@dataclass
class TestResultSummary:
    """Counts per Allure status for one results directory."""
    __test__ = False

    total: int = 0
    passed: int = 0
    failed: int = 0
    broken: int = 0
    skipped: int = 0
    unknown: int = 0
    duration_ms: int = 0

    @property
    def pass_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return self.passed * 100 / self.total


class AllureReportProcessor:
    """
    Reads an allure-results directory and drives the `allure` CLI.

    Usage:
        processor = AllureReportProcessor(Path("reports/allure-results"))
        processor.log_summary()
        processor.generate_report()
    """

    def __init__(self, results_dir: Path, report_dir: Optional[Path] = None):
        """
        Args:
            results_dir: Where allure-pytest wrote its result files
            report_dir: HTML output (defaults to a sibling 'allure-report')
        """
        self.results_dir = Path(results_dir)
        self.report_dir = Path(report_dir or self.results_dir.parent / "allure-report")

    def parse_results(self) -> List[Dict[str, Any]]:
        """Load every *-result.json file; unreadable files are logged and skipped."""
        results = []
        for path in sorted(self.results_dir.glob("*-result.json")):
            try:
                results.append(json.loads(path.read_text(encoding="utf-8")))
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Skipping unreadable result {path.name}: {e}")
        return results

    def generate_summary(self) -> TestResultSummary:
        results = self.parse_results()
        statuses = Counter(result.get("status", "unknown") for result in results)

        known = ("passed", "failed", "broken", "skipped")
        return TestResultSummary(
            total=len(results),
            passed=statuses["passed"],
            failed=statuses["failed"],
            broken=statuses["broken"],
            skipped=statuses["skipped"],
            unknown=sum(n for status, n in statuses.items() if status not in known),
            duration_ms=sum(r.get("stop", 0) - r.get("start", 0) for r in results),
        )

    def generate_report(self) -> bool:
        """
        Build the static HTML report with `allure generate --clean`.

        Returns:
            False when the CLI is missing or fails
        """
        cmd = ["allure", "generate", str(self.results_dir), "-o", str(self.report_dir), "--clean"]
        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except FileNotFoundError:
            logger.warning("⚠️ 'allure' command not found; install the Allure CLI to build HTML reports")
            return False

        if result.returncode != 0:
            logger.error(f"allure generate failed: {result.stderr}")
            return False

        logger.info(f"📊 HTML report written to {self.report_dir}")
        return True

    def serve_report(self) -> int:
        """
        Open the results with `allure serve` (blocks until the server stops).

        Returns:
            CLI exit code, 127 when the CLI is not installed
        """
        try:
            return subprocess.run(["allure", "serve", str(self.results_dir)]).returncode
        except FileNotFoundError:
            logger.warning("⚠️ 'allure' command not found; install the Allure CLI to serve reports")
            return 127

    def log_summary(self) -> None:
        summary = self.generate_summary()

        logger.info("=" * 60)
        logger.info("FORM SUITE RESULTS")
        logger.info("=" * 60)
        logger.info(f"Total:      {summary.total}")
        logger.info(f"Passed:     {summary.passed}")
        logger.info(f"Failed:     {summary.failed}")
        logger.info(f"Broken:     {summary.broken}")
        logger.info(f"Skipped:    {summary.skipped}")
        logger.info(f"Pass rate:  {summary.pass_rate:.2f}%")
        logger.info(f"Duration:   {summary.duration_ms / 1000:.2f}s")
        logger.info("=" * 60)


__all__ = [
    "attach_json",
    "attach_text",
    "attach_form_values",
    "TestResultSummary",
    "AllureReportProcessor",
]
