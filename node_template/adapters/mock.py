"""
Mock scaffolder — test double for every framework.

Records each execution context so tests can check which projects were
generated and in what order, without running npx or writing files.
"""

from __future__ import annotations

from node_template.adapters.base import ExecutionContext, Scaffolder
from node_template.core.models.action import Receipt


class MockScaffolder(Scaffolder):
    """Scaffolder that succeeds by default and records every call.

    Failures can be configured per action ID; an unavailable mock
    exercises the registry's availability check.
    """

    def __init__(
        self,
        scaffolder_name: str = "mock",
        available: bool = True,
        default_output: str = "[mock] scaffolded",
    ):
        self._name = scaffolder_name
        self._available = available
        self._default_output = default_output
        self._responses: dict[str, Receipt] = {}
        self._call_log: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[ExecutionContext]:
        """All execution contexts this mock has received, in order."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    @property
    def called_actions(self) -> list[str]:
        """Action IDs in call order."""
        return [ctx.action.id for ctx in self._call_log]

    def is_available(self) -> bool:
        return self._available

    def set_failure(self, action_id: str, error: str = "Mock failure") -> None:
        """Configure a specific action to fail."""
        self._responses[action_id] = Receipt.failure(
            adapter=self._name,
            action_id=action_id,
            error=error,
        )

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        self._call_log.append(context)

        if context.action.id in self._responses:
            return self._responses[context.action.id]

        return Receipt.success(
            adapter=self._name,
            action_id=context.action.id,
            output=self._default_output,
            metadata={"mock": True},
        )
