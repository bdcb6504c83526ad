"""Append-only sink shared by the handlers of one evaluation pass."""

from __future__ import annotations

from collections.abc import Iterator

from pexeval.models.result import HandlerCheckResult


class ResultLog:
    """Ordered, append-only collection of result records.

    Handlers only ever append; records are immutable, so a snapshot is
    safe to hand to consumers while the chain keeps running. A single
    writer is assumed (handlers run sequentially).
    """

    def __init__(self) -> None:
        self._records: list[HandlerCheckResult] = []

    def append(self, record: HandlerCheckResult) -> None:
        self._records.append(record)

    def snapshot(self) -> tuple[HandlerCheckResult, ...]:
        return tuple(self._records)

    def __iter__(self) -> Iterator[HandlerCheckResult]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._records)
