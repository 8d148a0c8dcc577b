"""Custom exceptions for reporting context."""

from pathlib import Path
from typing import Optional


class TemplateRenderError(Exception):
    """
    Exception raised when report template rendering fails.

    Attributes:
        message: Error description
        report_type: Name of the report type being rendered
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        report_type: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.report_type = report_type
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if report_type and template_path:
            parts.append(f"\nTemplate: {template_path}")
            parts.append(f"Report type: {report_type}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class ReportWriteError(OSError):
    """
    Exception raised when a rendered report cannot be written.

    The output file may be missing or truncated afterwards.

    Attributes:
        message: Error description
        output_path: Report path that could not be written
        original_error: The underlying OSError
    """

    def __init__(
        self,
        message: str,
        output_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.output_path = output_path
        self.original_error = original_error

        parts = [message]
        if original_error:
            parts.append(f"Original error: {str(original_error)}")

        super().__init__("\n".join(parts))
