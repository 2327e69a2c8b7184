"""
Scaffolder base — the contract between the generate flow and the tools
that actually create a project.

The generate use case only talks to scaffolders through this protocol,
never directly to npx or the filesystem.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from node_template.core.models.action import Action, Receipt


class ExecutionContext(BaseModel):
    """Everything a scaffolder needs to execute an action."""

    action: Action
    project_root: str = "."
    dry_run: bool = False
    params: dict[str, Any] = Field(default_factory=dict)

    @property
    def target_dir(self) -> Path:
        """Absolute-or-root-relative directory being scaffolded."""
        return Path(self.project_root) / self.action.target

    @property
    def typescript(self) -> bool:
        return bool(self.params.get("typescript", False))


class Scaffolder(ABC):
    """Abstract base class for all scaffolders.

    Scaffolders perform the side effects and return receipts.
    They never raise: failures are captured in the Receipt.

    To add a framework:
        1. Subclass Scaffolder (or reuse one of the shell variants)
        2. Implement name, is_available, validate, execute
        3. Register it in the ScaffolderRegistry
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The framework identifier (e.g., 'react', 'next', 'express')."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the underlying tool can run. Fast, never raises."""

    def unavailable_reason(self) -> str:
        """Message for a failed receipt when ``is_available()`` is False."""
        return f"Scaffolder '{self.name}' is not available"

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Check preconditions before any side effect.

        Returns:
            (is_valid, error_message). error_message is empty if valid.
        """

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Receipt:
        """Generate the project and return a receipt."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
