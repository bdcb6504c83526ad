"""Document parser with line tracking for rich error reporting.

Definitions and credential sets may be written as YAML or JSON. Both
are read through a PyYAML SafeLoader subclass that records the source
position of every key, so validation errors can point at the exact
line of the offending property.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

import yaml

LineMap = dict[str, tuple[int, int]]


class DocumentParseError(Exception):
    """Raised when a document's YAML or JSON syntax cannot be parsed.

    Attributes:
        line: 1-indexed line number where the error occurred.
        column: 1-indexed column number where the error occurred.
        message: Human-readable description of the syntax error.
        filename: Name of the file being parsed, or '<string>'.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        filename: str = "<string>",
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename
        super().__init__(message)


class LineTrackingLoader(yaml.SafeLoader):
    """SafeLoader that maps dotted key paths to (line, column) positions.

    Sequence items contribute their index to the path, so the key
    ``input_descriptors.0.constraints.fields.1.path`` lines up with the
    loc tuple of a pydantic error on the same property.
    """

    def __init__(self, stream: str) -> None:
        super().__init__(stream)
        self.line_map: LineMap = {}
        self._prefix: list[str] = []

    def _record(self, key: str, node: yaml.Node) -> None:
        full_key = ".".join([*self._prefix, key])
        self.line_map[full_key] = (node.start_mark.line + 1, node.start_mark.column + 1)

    def _construct_nested(self, segment: str, node: yaml.Node, deep: bool) -> Any:
        if isinstance(node, (yaml.MappingNode, yaml.SequenceNode)):
            self._prefix.append(segment)
            try:
                return self.construct_object(node, deep=deep)
            finally:
                self._prefix.pop()
        return self.construct_object(node, deep=deep)

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[str, Any]:
        self.flatten_mapping(node)
        mapping: dict[Any, Any] = {}
        for key_node, value_node in node.value:
            key = self.construct_object(key_node, deep=deep)
            if isinstance(key, str):
                self._record(key, key_node)
                mapping[key] = self._construct_nested(key, value_node, deep)
            else:
                mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping

    def construct_sequence(self, node: yaml.SequenceNode, deep: bool = False) -> list[Any]:
        items = []
        for idx, child in enumerate(node.value):
            self._record(str(idx), child)
            items.append(self._construct_nested(str(idx), child, deep))
        return items

    def construct_yaml_map(self, node: yaml.MappingNode) -> Any:
        yield self.construct_mapping(node, deep=True)

    def construct_yaml_seq(self, node: yaml.SequenceNode) -> Any:
        yield self.construct_sequence(node, deep=True)


LineTrackingLoader.add_constructor(
    "tag:yaml.org,2002:map",
    LineTrackingLoader.construct_yaml_map,
)

LineTrackingLoader.add_constructor(
    "tag:yaml.org,2002:seq",
    LineTrackingLoader.construct_yaml_seq,
)

# Dates stay strings, as they would in the equivalent JSON document
LineTrackingLoader.add_constructor(
    "tag:yaml.org,2002:timestamp",
    LineTrackingLoader.construct_yaml_str,
)

# YAML 1.1 needs a dot and a signed exponent; JSON accepts 1e2 and 1.5e3
LineTrackingLoader.add_implicit_resolver(
    "tag:yaml.org,2002:float",
    re.compile(r"^-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?[eE][-+]?[0-9]+$"),
    list("-0123456789"),
)


def _parse_json(source: str, filename: str) -> Any:
    try:
        return json.loads(source)
    except json.JSONDecodeError as e:
        raise DocumentParseError(
            message=e.msg,
            line=e.lineno,
            column=e.colno,
            filename=filename,
        ) from e


def parse_document_with_lines(
    source: str,
    filename: str = "<string>",
) -> tuple[Any, LineMap]:
    """Parse a YAML or JSON string and return (data, line_map).

    JSON that PyYAML rejects (tab indentation, for instance) is re-read
    with the json module for ``.json`` files; such documents come back
    with an empty line map.

    Returns:
        A tuple of (parsed_data, line_map). parsed_data is None for an
        empty or comment-only document.

    Raises:
        DocumentParseError: If the document contains syntax errors.
    """
    loader = LineTrackingLoader(source)
    try:
        data = loader.get_single_data()
    except yaml.YAMLError as e:
        if filename.endswith(".json"):
            return _parse_json(source, filename), {}
        line = None
        column = None
        mark = getattr(e, "problem_mark", None)
        if mark is not None:
            line = mark.line + 1
            column = mark.column + 1
        raise DocumentParseError(
            message=str(e),
            line=line,
            column=column,
            filename=filename,
        ) from e
    finally:
        loader.dispose()

    return data, loader.line_map


def parse_document_file(filepath: Path) -> tuple[Any, LineMap]:
    """Parse a YAML or JSON file and return (data, line_map).

    Raises:
        DocumentParseError: If the file contains syntax errors.
        FileNotFoundError: If the file does not exist.
    """
    content = filepath.read_text(encoding="utf-8")
    return parse_document_with_lines(content, filename=str(filepath))
