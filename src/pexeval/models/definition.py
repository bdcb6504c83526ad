"""Presentation definition and credential set models.

These models encode the Presentation Exchange input contract: the
definition's input descriptors with their field constraints, and the
ordered set of credentials being evaluated against them.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, JsonValue


class FieldConstraint(BaseModel):
    """A single constrained data point inside a credential.

    ``path`` holds one or more candidate JSONPath queries tried in order
    until one matches. ``filter`` is an optional JSON Schema applied to
    the matched value. An ``optional`` field that is absent still yields
    an error record but does not stop a credential satisfying its
    descriptor in the outcome summary.
    """

    model_config = {"extra": "forbid"}

    id: str | None = None
    path: list[str] = Field(min_length=1)
    filter: dict[str, Any] | None = None
    name: str | None = None
    purpose: str | None = None
    optional: bool = False
    intent_to_retain: bool | None = None
    predicate: Literal["required", "preferred"] | None = None


class Constraints(BaseModel):
    """Constraint block of an input descriptor."""

    model_config = {"extra": "forbid"}

    fields: list[FieldConstraint] = Field(default_factory=list)
    limit_disclosure: Literal["required", "preferred"] | None = None
    statuses: dict[str, Any] | None = None
    subject_is_issuer: Literal["required", "preferred"] | None = None
    is_holder: list[dict[str, Any]] | None = None
    same_subject: list[dict[str, Any]] | None = None


class InputDescriptor(BaseModel):
    """One requirement within a presentation definition."""

    model_config = {"extra": "forbid", "populate_by_name": True}

    id: str
    name: str | None = None
    purpose: str | None = None
    format: dict[str, Any] | None = None
    group: list[str] = Field(default_factory=list)
    # Presentation Exchange v1 descriptors carry a schema list
    schema_: list[dict[str, Any]] | None = Field(default=None, alias="schema")
    constraints: Constraints | None = None

    def has_fields(self) -> bool:
        """True when the descriptor declares at least one field constraint."""
        return self.constraints is not None and len(self.constraints.fields) > 0


class PresentationDefinition(BaseModel):
    """A presentation definition loaded from JSON or YAML.

    Only ``input_descriptors`` drives evaluation. Submission requirements
    and format negotiation are carried through untouched.
    """

    model_config = {"extra": "forbid"}

    id: str
    name: str | None = None
    purpose: str | None = None
    format: dict[str, Any] | None = None
    frame: dict[str, Any] | None = None
    submission_requirements: list[dict[str, Any]] | None = None
    input_descriptors: list[InputDescriptor] = Field(default_factory=list)


class CredentialSet(BaseModel):
    """The credentials under evaluation, addressable by position.

    Mirrors the ``verifiableCredential`` property of a verifiable
    presentation. Other presentation keys (``@context``, ``holder``,
    ``proof``) are kept but never read.
    """

    model_config = {"extra": "allow", "populate_by_name": True}

    verifiable_credential: list[JsonValue] = Field(
        default_factory=list, alias="verifiableCredential"
    )
