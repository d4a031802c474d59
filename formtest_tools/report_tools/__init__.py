from .allure_utils import (
    AllureReportProcessor,
    TestResultSummary,
    attach_form_values,
    attach_json,
    attach_text,
)

__all__ = [
    "AllureReportProcessor",
    "TestResultSummary",
    "attach_form_values",
    "attach_json",
    "attach_text",
]
