"""pexeval data models - re-exports all public model classes."""

from pexeval.models.config import EvaluationConfig, ProjectConfig
from pexeval.models.definition import (
    Constraints,
    CredentialSet,
    FieldConstraint,
    InputDescriptor,
    PresentationDefinition,
)
from pexeval.models.report import DescriptorOutcome, EvaluationReport
from pexeval.models.result import CheckPayload, HandlerCheckResult, Status

__all__ = [
    "CheckPayload",
    "Constraints",
    "CredentialSet",
    "DescriptorOutcome",
    "EvaluationConfig",
    "EvaluationReport",
    "FieldConstraint",
    "HandlerCheckResult",
    "InputDescriptor",
    "PresentationDefinition",
    "ProjectConfig",
    "Status",
]
