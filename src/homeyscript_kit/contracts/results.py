"""Operation result contracts."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from homeyscript_kit.contracts.script import Script, ScriptRef


class OperationAction(str, Enum):
    CREATE = "ADD"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    RESTORE = "RESTORE"
    BACKUP = "BACKUP"
    PULL = "PULL"


class FulfilledResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    script: Script
    status: Literal["fulfilled"] = "fulfilled"
    action: OperationAction


class RejectedResult(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    script: ScriptRef
    status: Literal["rejected"] = "rejected"
    reason: BaseException
    action: OperationAction | None = None


OperationResult = Annotated[FulfilledResult | RejectedResult, Field(discriminator="status")]


class OperationSummary(BaseModel):
    successful: int = 0
    failed: int = 0


class NormalizedOperationResults(BaseModel):
    """Per-item results of one batch plus their summary counts.

    Both fields are ``None`` when the batch had no items at all, which is
    distinct from a batch that ran and produced an empty list.
    """

    results: list[OperationResult] | None = None
    summary: OperationSummary | None = None

    @classmethod
    def empty(cls) -> NormalizedOperationResults:
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.results is None

    @property
    def fulfilled(self) -> list[FulfilledResult]:
        return [r for r in self.results or [] if isinstance(r, FulfilledResult)]

    @property
    def rejected(self) -> list[RejectedResult]:
        return [r for r in self.results or [] if isinstance(r, RejectedResult)]
