"""
Action and Receipt models — the scaffolding contract.

An Action asks one scaffolder to generate one project directory.
A Receipt records what happened. Scaffolders answer with receipts,
never with exceptions.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


def _now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(UTC).isoformat()


class Action(BaseModel):
    """A requested scaffolding step.

    ``adapter`` names the scaffolder (``react``, ``next``, ``express``).
    ``params`` carries the target directory and the language options.
    """

    id: str                         # e.g. "frontend:react"
    name: str = ""                  # human-readable name
    adapter: str                    # which scaffolder handles this
    params: dict[str, Any] = Field(default_factory=dict)

    @property
    def target(self) -> str:
        """Directory the scaffolder generates into (relative to the root)."""
        return str(self.params.get("target", ""))


class Receipt(BaseModel):
    """Result of a scaffolder execution.

    Failures are captured here with a user-facing ``error`` message.
    ``metadata`` holds what was created so far, even on failure.
    """

    adapter: str
    action_id: str
    status: Literal["ok", "skipped", "failed"] = "ok"

    started_at: str = Field(default_factory=_now_iso)
    ended_at: str = Field(default_factory=_now_iso)
    duration_ms: int = 0

    output: str = ""
    error: str | None = None

    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Whether the action succeeded."""
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        """Whether the action failed."""
        return self.status == "failed"

    @property
    def skipped(self) -> bool:
        return self.status == "skipped"

    @classmethod
    def success(
        cls,
        adapter: str,
        action_id: str,
        output: str = "",
        **kwargs: Any,
    ) -> Receipt:
        """Create a success receipt."""
        return cls(
            adapter=adapter,
            action_id=action_id,
            status="ok",
            output=output,
            **kwargs,
        )

    @classmethod
    def failure(
        cls,
        adapter: str,
        action_id: str,
        error: str,
        **kwargs: Any,
    ) -> Receipt:
        """Create a failure receipt."""
        return cls(
            adapter=adapter,
            action_id=action_id,
            status="failed",
            error=error,
            **kwargs,
        )

    @classmethod
    def skip(
        cls,
        adapter: str,
        action_id: str,
        reason: str = "",
        **kwargs: Any,
    ) -> Receipt:
        """Create a skip receipt (dry-run)."""
        return cls(
            adapter=adapter,
            action_id=action_id,
            status="skipped",
            output=reason,
            **kwargs,
        )
