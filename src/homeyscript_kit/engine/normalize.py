"""Result normalization."""

from __future__ import annotations

from collections.abc import Sequence

from homeyscript_kit.contracts.results import NormalizedOperationResults, OperationResult, OperationSummary


def normalize_results(results: Sequence[OperationResult]) -> NormalizedOperationResults:
    """Count fulfilled and rejected results, keeping every result in input order."""
    successful = sum(1 for result in results if result.status == "fulfilled")
    failed = sum(1 for result in results if result.status == "rejected")
    return NormalizedOperationResults(
        results=list(results),
        summary=OperationSummary(successful=successful, failed=failed),
    )


def group_by_status(normalized: NormalizedOperationResults) -> dict[str, list[OperationResult]]:
    groups: dict[str, list[OperationResult]] = {"fulfilled": [], "rejected": []}
    for result in normalized.results or []:
        groups[result.status].append(result)
    return groups
