"""Project configuration model for pexeval.

Captures pexeval.yaml fields with sensible defaults for project-level
settings like the handler chain, JSONPath dialect, and storage paths.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

CONFIG_FILENAME = "pexeval.yaml"


class EvaluationConfig(BaseModel):
    """Settings for the evaluation handler chain and its collaborators.

    ``jsonpath_dialect`` selects between jsonpath-ng's extended parser
    (filter expressions, arithmetic) and its standard one. ``schema_draft``
    is the JSON Schema draft used for filters that carry no ``$schema``.
    """

    model_config = {"extra": "forbid"}

    handlers: list[str] = Field(default_factory=lambda: ["FilterEvaluation"])
    jsonpath_dialect: Literal["extended", "standard"] = "extended"
    schema_draft: Literal["draft7", "draft2019-09", "draft2020-12"] = "draft7"
    check_formats: bool = False


class ProjectConfig(BaseModel):
    """Project-level configuration loaded from pexeval.yaml."""

    model_config = {"extra": "forbid"}

    definitions_dir: str = "definitions"
    storage_dir: str = ".pexeval"
    ci_mode: bool = False
    evaluation: EvaluationConfig = Field(default_factory=EvaluationConfig)


def find_project_root(start: Path | None = None) -> Path:
    """Walk up from start (default: cwd) looking for pexeval.yaml or .pexeval/.

    Returns the first directory containing either marker, or the cwd
    if neither is found.
    """
    current = (start or Path.cwd()).resolve()
    if current.is_file():
        current = current.parent
    while current != current.parent:
        if (current / CONFIG_FILENAME).exists() or (current / ".pexeval").exists():
            return current
        current = current.parent
    return Path.cwd()


def load_project_config(project_root: Path | None = None) -> ProjectConfig:
    """Load ProjectConfig from pexeval.yaml. Returns defaults if not found.

    Args:
        project_root: Path to the project root directory. If None,
            uses find_project_root() to locate it.

    Returns:
        Validated ProjectConfig instance.
    """
    if project_root is None:
        project_root = find_project_root()
    config_path = project_root / CONFIG_FILENAME
    if not config_path.exists():
        return ProjectConfig()
    import yaml

    raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if raw is None:
        return ProjectConfig()
    return ProjectConfig.model_validate(raw)
