"""JSONPath extraction of constrained fields from credential documents.

Field paths are tried in declared order; the first path that matches
anything wins and all of its matches are returned as match nodes.
"""

from __future__ import annotations

import copy
import logging
import re
from functools import lru_cache
from typing import Any, Literal, TypedDict

import jsonpath_ng
import jsonpath_ng.ext
from jsonpath_ng.exceptions import JSONPathError
from jsonpath_ng.jsonpath import Child, Fields, Index, JSONPath, Root, This

from pexeval.evaluation.errors import PathSyntaxError

logger = logging.getLogger(__name__)

Dialect = Literal["extended", "standard"]

_PLAIN_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class MatchNode(TypedDict):
    """A matched value and the concrete path it was found at."""

    value: Any
    path: str


@lru_cache(maxsize=512)
def compile_path(expression: str, dialect: Dialect = "extended") -> JSONPath:
    """Parse a JSONPath expression, caching the compiled form.

    Raises:
        PathSyntaxError: If the expression cannot be parsed.
    """
    parser = jsonpath_ng.ext.parse if dialect == "extended" else jsonpath_ng.parse
    try:
        return parser(expression)
    except JSONPathError as exc:
        raise PathSyntaxError(expression, str(exc)) from exc


def _field_segment(name: str) -> str:
    if _PLAIN_NAME.fullmatch(name):
        return f".{name}"
    escaped = name.replace("\\", "\\\\").replace("'", "\\'")
    return f"['{escaped}']"


def _render_segments(path: JSONPath) -> str:
    if isinstance(path, (Root, This)):
        return ""
    if isinstance(path, Child):
        return _render_segments(path.left) + _render_segments(path.right)
    if isinstance(path, Fields):
        return "".join(_field_segment(str(name)) for name in path.fields)
    if isinstance(path, Index):
        return str(path)
    return f".{path}"


def concrete_path(full_path: JSONPath) -> str:
    """Render the full path of a match as ``$.a.b[0]['c d']``."""
    return "$" + _render_segments(full_path)


def extract_input_field(
    document: Any,
    paths: list[str],
    dialect: Dialect = "extended",
) -> list[MatchNode]:
    """Return the match nodes of the first path in *paths* that matches.

    A path whose evaluation fails on the document's data, such as a
    filter expression comparing a number with null, counts as not
    matching and the next path is tried.

    Args:
        document: Credential document (any JSON value).
        paths: Candidate JSONPath expressions, tried in order.
        dialect: jsonpath-ng parser to use.

    Returns:
        Match nodes of the first matching path, or an empty list when
        no path matches. Values are deep copies of the document data.

    Raises:
        PathSyntaxError: If any tried path is malformed.
    """
    for path in paths:
        expression = compile_path(path, dialect)
        try:
            matches = expression.find(document)
        except (KeyError, TypeError, ValueError) as exc:
            logger.debug("path %s not evaluable on document: %s", path, exc)
            continue
        if matches:
            return [
                MatchNode(
                    value=copy.deepcopy(match.value),
                    path=concrete_path(match.full_path),
                )
                for match in matches
            ]
    return []
