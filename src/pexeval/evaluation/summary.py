"""Per-descriptor outcome summary over a sequence of result records.

A credential satisfies a descriptor when every record addressed to
that (descriptor, credential) pair is valid, apart from path misses on
optional fields. This is a reading aid for the audit trail, not
submission requirement logic.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from pexeval import __version__
from pexeval.evaluation.handlers.filter_evaluation import EVALUATOR_NAME, PATH_NOT_FOUND_MESSAGE
from pexeval.models.definition import PresentationDefinition
from pexeval.models.report import DescriptorOutcome, EvaluationReport, new_run_id
from pexeval.models.result import HandlerCheckResult, credential_path, descriptor_path


def _optional_fields(definition: PresentationDefinition) -> dict[str, list[bool]]:
    return {
        descriptor_path(i): [field.optional for field in descriptor.constraints.fields]
        for i, descriptor in enumerate(definition.input_descriptors)
        if descriptor.has_fields()
    }


def summarize(
    definition: PresentationDefinition,
    credential_count: int,
    results: Iterable[HandlerCheckResult],
) -> list[DescriptorOutcome]:
    """Group records by descriptor and credential and decide satisfaction.

    Filter evaluation records arrive in field order for each pair, so
    a path miss on a field marked ``optional`` does not count against
    the credential. A filter failure on an optional field still does.
    Pairs with no records at all (e.g. an empty handler chain) count as
    unsatisfied.

    Returns:
        One DescriptorOutcome per descriptor, in definition order.
    """
    optional = _optional_fields(definition)
    verdicts: dict[tuple[str, str], bool] = {}
    field_positions: dict[tuple[str, str], int] = {}
    for record in results:
        key = (record.input_descriptor_path, record.verifiable_credential_path)
        valid = record.valid
        if record.evaluator == EVALUATOR_NAME:
            position = field_positions.get(key, 0)
            field_positions[key] = position + 1
            flags = optional.get(record.input_descriptor_path, [])
            if (
                not valid
                and record.message == PATH_NOT_FOUND_MESSAGE
                and position < len(flags)
                and flags[position]
            ):
                valid = True
        verdicts[key] = verdicts.get(key, True) and valid

    outcomes: list[DescriptorOutcome] = []
    for i, descriptor in enumerate(definition.input_descriptors):
        id_path = descriptor_path(i)
        outcome = DescriptorOutcome(input_descriptor_path=id_path, descriptor_id=descriptor.id)
        for j in range(credential_count):
            vc_path = credential_path(j)
            if verdicts.get((id_path, vc_path), False):
                outcome.satisfied_by.append(vc_path)
            else:
                outcome.failed.append(vc_path)
        outcomes.append(outcome)
    return outcomes


def all_satisfied(outcomes: list[DescriptorOutcome]) -> bool:
    """True when every descriptor is satisfied by at least one credential."""
    return all(outcome.satisfied for outcome in outcomes)


def build_report(
    definition: PresentationDefinition,
    credential_count: int,
    results: list[HandlerCheckResult],
    definition_file: str | None = None,
    credentials_file: str | None = None,
) -> EvaluationReport:
    """Bundle records and their descriptor outcomes into an EvaluationReport."""
    outcomes = summarize(definition, credential_count, results)
    return EvaluationReport(
        run_id=new_run_id(),
        timestamp=datetime.now(timezone.utc),
        definition_id=definition.id,
        definition_file=definition_file,
        credentials_file=credentials_file,
        credential_count=credential_count,
        pexeval_version=__version__,
        results=list(results),
        outcomes=outcomes,
        passed=all_satisfied(outcomes),
    )
