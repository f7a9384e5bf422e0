"""Script contracts."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Script(BaseModel):
    """A remote HomeyScript record.

    ``name`` is the only key shared between the hub and the local filesystem;
    ``id`` is assigned by the hub on creation. Unknown wire fields are kept so
    a backup holds the full record.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str | None = None
    name: str
    code: str | None = None
    version: str | int | None = None
    last_executed: str | int | None = Field(default=None, alias="lastExecuted")

    def to_payload(self) -> dict[str, object]:
        """Wire form of every field that was given, explicit ``null`` values included."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class ScriptRef(BaseModel):
    """Partial script identity used when an item failed before a full record existed."""

    id: str | None = None
    name: str | None = None


class CommandEvent(BaseModel):
    """Arguments and flags of one command invocation."""

    flags: dict[str, object] = Field(default_factory=dict)
    args: list[str] = Field(default_factory=list)

    def arg(self, index: int) -> str | None:
        return self.args[index] if index < len(self.args) else None

    def flag(self, name: str) -> str | None:
        value = self.flags.get(name)
        return value if isinstance(value, str) else None
