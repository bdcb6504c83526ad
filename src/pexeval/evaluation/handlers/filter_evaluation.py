"""Input descriptor filter evaluation.

Checks every credential against every input descriptor's field
constraints: each field path must resolve in the credential, and the
first matched value must satisfy the field's filter when one is given.
"""

from __future__ import annotations

import logging

from pexeval.evaluation.filters import validate_filter
from pexeval.evaluation.handlers.base import BaseEvaluationHandler
from pexeval.evaluation.jsonpath import extract_input_field
from pexeval.models.definition import (
    CredentialSet,
    FieldConstraint,
    InputDescriptor,
    PresentationDefinition,
)
from pexeval.models.result import HandlerCheckResult, credential_path, descriptor_path

logger = logging.getLogger(__name__)

EVALUATOR_NAME = "FilterEvaluation"
PATH_NOT_FOUND_MESSAGE = "Input candidate failed to find jsonpath property"
FILTER_FAILED_MESSAGE = "Input candidate failed filter evaluation"


class InputDescriptorFilterEvaluationHandler(BaseEvaluationHandler):
    """Emits one record per (descriptor, field, credential).

    Descriptors without fields yield a single passing record per
    credential. Records are appended credential-major, then by
    descriptor, then by field.
    """

    @property
    def name(self) -> str:
        return EVALUATOR_NAME

    def handle(
        self, definition: PresentationDefinition, credentials: CredentialSet
    ) -> None:
        descriptors = definition.input_descriptors
        descriptor_paths = [descriptor_path(i) for i in range(len(descriptors))]

        for j, credential in enumerate(credentials.verifiable_credential):
            vc_path = credential_path(j)
            for descriptor, id_path in zip(descriptors, descriptor_paths):
                if descriptor.has_fields():
                    self._evaluate_fields(descriptor, id_path, credential, vc_path)
                else:
                    self.results.append(
                        HandlerCheckResult.info(self.name, id_path, vc_path, result=[])
                    )

    def _evaluate_fields(
        self,
        descriptor: InputDescriptor,
        id_path: str,
        credential: object,
        vc_path: str,
    ) -> None:
        for field in descriptor.constraints.fields:
            matches = extract_input_field(
                credential, field.path, dialect=self.config.jsonpath_dialect
            )
            if not matches:
                logger.debug(
                    "%s: no match for %s in %s", descriptor.id, field.path, vc_path
                )
                self.results.append(
                    HandlerCheckResult.error(
                        self.name, id_path, vc_path,
                        result=[], message=PATH_NOT_FOUND_MESSAGE,
                    )
                )
                continue

            # First match wins; later matches of the same path are ignored.
            node = matches[0]
            if not self._passes_filter(field, node["value"]):
                logger.debug(
                    "%s: filter rejected %s in %s", descriptor.id, node["path"], vc_path
                )
                self.results.append(
                    HandlerCheckResult.error(
                        self.name, id_path, vc_path,
                        result=node, message=FILTER_FAILED_MESSAGE,
                    )
                )
            else:
                self.results.append(
                    HandlerCheckResult.info(self.name, id_path, vc_path, result=node)
                )

    def _passes_filter(self, field: FieldConstraint, value: object) -> bool:
        if field.filter is None:
            return True
        return validate_filter(
            field.filter,
            value,
            draft=self.config.schema_draft,
            check_formats=self.config.check_formats,
        )
