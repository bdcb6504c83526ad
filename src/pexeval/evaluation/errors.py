"""Fatal configuration errors raised by evaluation collaborators.

Data-level mismatches never raise; they become result records. These
exceptions signal a malformed definition (bad JSONPath syntax, invalid
filter schema) and abort the whole evaluation pass.
"""

from __future__ import annotations

from typing import Any


class EvaluationConfigError(Exception):
    """Base class for errors caused by a malformed presentation definition."""


class PathSyntaxError(EvaluationConfigError):
    """Raised when a field path is not a valid JSONPath expression.

    Attributes:
        path: The offending path expression.
        reason: Parser message describing the problem.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid JSONPath {path!r}: {reason}")


class FilterSchemaError(EvaluationConfigError):
    """Raised when a field filter is not a valid JSON Schema.

    Attributes:
        schema: The offending filter.
        reason: Validator message describing the problem.
    """

    def __init__(self, schema: Any, reason: str) -> None:
        self.schema = schema
        self.reason = reason
        super().__init__(f"Invalid filter schema: {reason}")
