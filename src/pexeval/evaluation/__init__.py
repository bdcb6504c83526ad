"""Evaluation package for presentation definition constraint checks.

Provides the handler chain host, the filter evaluation handler, and
the JSONPath and JSON Schema collaborators it relies on.
"""

from __future__ import annotations

from pexeval.evaluation.client import EvaluationClient
from pexeval.evaluation.errors import (
    EvaluationConfigError,
    FilterSchemaError,
    PathSyntaxError,
)
from pexeval.evaluation.filters import validate_filter
from pexeval.evaluation.handlers import get_handler
from pexeval.evaluation.handlers.base import BaseEvaluationHandler
from pexeval.evaluation.jsonpath import extract_input_field
from pexeval.evaluation.results import ResultLog
from pexeval.evaluation.summary import all_satisfied, build_report, summarize

__all__ = [
    "BaseEvaluationHandler",
    "EvaluationClient",
    "EvaluationConfigError",
    "FilterSchemaError",
    "PathSyntaxError",
    "ResultLog",
    "all_satisfied",
    "build_report",
    "extract_input_field",
    "get_handler",
    "summarize",
    "validate_filter",
]
