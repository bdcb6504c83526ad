"""Error formatter with dual-mode output (annotated human and CI concise).

Human mode prints the offending source line with a caret underline
below the property name; CI mode prints one ``file:line:col -- message``
line per error.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pexeval.loader.validator import ValidationErrorDetail


# Pydantic (and loader) error types -> error codes
ERROR_CODES: dict[str, str] = {
    "extra_forbidden": "E001",
    "missing": "E002",
    "value_error": "E003",
    "too_short": "E003",
    "string_type": "E004",
    "list_type": "E004",
    "dict_type": "E004",
    "bool_type": "E004",
    "bool_parsing": "E004",
    "model_type": "E004",
    "literal_error": "E005",
    "syntax_error": "E006",
    "empty_file": "E007",
}

ERROR_DESCRIPTIONS: dict[str, str] = {
    "E001": "unknown property",
    "E002": "required property missing",
    "E003": "invalid value",
    "E004": "type mismatch",
    "E005": "invalid literal",
    "E006": "syntax error",
    "E007": "empty document",
}


def ci_mode_from_env() -> bool:
    return os.environ.get("CI", "").lower() in ("true", "1", "yes")


class ErrorFormatter:
    """Formats definition validation errors for humans or CI logs.

    Args:
        ci_mode: If True, use concise single-line output. If None,
            auto-detect from the CI environment variable.
    """

    def __init__(self, ci_mode: bool | None = None) -> None:
        self.ci_mode = ci_mode_from_env() if ci_mode is None else ci_mode

    @staticmethod
    def error_code(error_type: str) -> str:
        if error_type in ERROR_CODES:
            return ERROR_CODES[error_type]
        if error_type.endswith("_type") or error_type.endswith("_parsing"):
            return "E004"
        return "E999"

    def format_error(
        self,
        error: ValidationErrorDetail,
        source_lines: list[str],
        filename: str,
    ) -> str:
        """Format a single error for display."""
        if self.ci_mode:
            return self._format_ci(error, filename)
        return self._format_annotated(error, source_lines, filename)

    def _format_ci(self, error: ValidationErrorDetail, filename: str) -> str:
        line = error.line if error.line is not None else 0
        col = error.col if error.col is not None else 0
        suffix = f" ({error.suggestion})" if error.suggestion else ""
        return f"{filename}:{line}:{col} -- {error.field}: {error.message}{suffix}"

    def _format_annotated(
        self,
        error: ValidationErrorDetail,
        source_lines: list[str],
        filename: str,
    ) -> str:
        """Produce output like::

            error[E001]: unknown property
              --> pd.yaml:7:9
               |
             7 |         paths: ["$.age"]
               |         ^^^^^ Extra inputs are not permitted
               |
               = help: Did you mean 'path'?
        """
        code = self.error_code(error.type)
        description = ERROR_DESCRIPTIONS.get(code, "validation error")
        out = [f"error[{code}]: {description}"]

        line_idx = error.line - 1 if error.line is not None else -1
        if 0 <= line_idx < len(source_lines):
            col = error.col if error.col is not None else 1
            src_line = source_lines[line_idx].rstrip()
            number = str(error.line)
            gutter = " " * len(number)
            out.append(f"  --> {filename}:{error.line}:{col}")
            out.append(f" {gutter} |")
            out.append(f" {number} | {src_line}")
            name = error.field.split(".")[-1]
            start = src_line.find(name)
            if start >= 0:
                out.append(f" {gutter} | {' ' * start}{'^' * len(name)} {error.message}")
            else:
                out.append(f" {gutter} | {error.message}")
            out.append(f" {gutter} |")
        else:
            out.append(f"  --> {filename}")
            out.append("   |")
            out.append(f"   | {error.field}: {error.message}")
            out.append("   |")

        if error.suggestion:
            out.append(f"   = help: {error.suggestion}")
        return "\n".join(out)

    def format_all(
        self,
        errors: list[ValidationErrorDetail],
        source: str,
        filename: str,
    ) -> str:
        """Format all errors, separated by blank lines."""
        source_lines = source.splitlines()
        return "\n\n".join(
            self.format_error(error, source_lines, filename) for error in errors
        )
