"""
Scaffolder registry — central dispatch for every framework.

The registry handles registration, lookup, mock mode, and action
execution. The generate use case never calls a scaffolder directly.
"""

from __future__ import annotations

import logging
import time

from node_template.adapters.base import ExecutionContext, Scaffolder
from node_template.core.models.action import Action, Receipt
from node_template.core.models.settings import Settings

logger = logging.getLogger(__name__)


class ScaffolderRegistry:
    """Central registry and dispatcher for scaffolders.

    Features:
        - Register scaffolders by framework name
        - Mock mode: route every action to one mock scaffolder
        - Check availability, validate, then execute (or dry-run) actions
    """

    def __init__(self, mock_mode: bool = False):
        self._scaffolders: dict[str, Scaffolder] = {}
        self._mock_mode = mock_mode
        self._mock_scaffolder: Scaffolder | None = None

    @property
    def mock_mode(self) -> bool:
        return self._mock_mode

    def set_mock_mode(self, enabled: bool, mock_scaffolder: Scaffolder | None = None) -> None:
        """Enable or disable mock mode.

        Args:
            enabled: Whether to use mock mode.
            mock_scaffolder: Optional scaffolder receiving every action.
                If None, actions succeed without any scaffolder.
        """
        self._mock_mode = enabled
        self._mock_scaffolder = mock_scaffolder

    def register(self, scaffolder: Scaffolder) -> None:
        name = scaffolder.name
        if name in self._scaffolders:
            logger.warning("Overwriting existing scaffolder: %s", name)
        self._scaffolders[name] = scaffolder
        logger.debug("Registered scaffolder: %s", name)

    def get(self, name: str) -> Scaffolder | None:
        return self._scaffolders.get(name)

    def list_scaffolders(self) -> list[str]:
        return list(self._scaffolders.keys())

    def execute_action(
        self,
        action: Action,
        project_root: str = ".",
        dry_run: bool = False,
    ) -> Receipt:
        """Execute an action through the matching scaffolder.

        Resolves the scaffolder (or mock), checks it is available,
        validates, then executes or returns a ``skipped`` receipt in
        dry-run. Never raises.

        Args:
            action: The action to execute.
            project_root: Directory the target path is relative to.
            dry_run: If True, validate but don't execute.

        Returns:
            Receipt with execution results.
        """
        start_time = time.monotonic()

        context = ExecutionContext(
            action=action,
            project_root=project_root,
            dry_run=dry_run,
            params=action.params,
        )

        scaffolder: Scaffolder | None = None
        if self._mock_mode and self._mock_scaffolder:
            scaffolder = self._mock_scaffolder
        elif self._mock_mode:
            return Receipt.success(
                adapter=action.adapter,
                action_id=action.id,
                output=f"[mock] {action.adapter}:{action.target} scaffolded",
                metadata={"mock": True, "dry_run": dry_run},
            )
        else:
            scaffolder = self._scaffolders.get(action.adapter)

        if scaffolder is None:
            return Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=f"No scaffolder registered for '{action.adapter}'",
            )

        if not scaffolder.is_available():
            return Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=scaffolder.unavailable_reason(),
                metadata={"stage": "availability"},
            )

        try:
            is_valid, error_msg = scaffolder.validate(context)
        except Exception as e:
            logger.error("Scaffolder %s raised during validation: %s", action.adapter, e)
            return Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=f"Validation error: {e}",
            )
        if not is_valid:
            return Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=error_msg,
                metadata={"stage": "validate"},
            )

        if dry_run:
            return Receipt.skip(
                adapter=action.adapter,
                action_id=action.id,
                reason=f"[dry-run] Would scaffold {action.target} with {action.adapter}",
                metadata={"dry_run": True},
            )

        try:
            receipt = scaffolder.execute(context)
        except Exception as e:
            logger.error("Scaffolder %s raised during execution: %s", action.adapter, e)
            receipt = Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=f"Unexpected error: {e}",
            )

        receipt.duration_ms = int((time.monotonic() - start_time) * 1000)
        return receipt


def build_registry(settings: Settings | None = None) -> ScaffolderRegistry:
    """Registry with every supported framework wired to its real scaffolder."""
    from node_template.adapters.shell.command import ExternalGeneratorScaffolder
    from node_template.adapters.shell.filesystem import FilesystemScaffolder
    from node_template.core.services.generators import express

    settings = settings or Settings()
    registry = ScaffolderRegistry()
    registry.register(
        ExternalGeneratorScaffolder(
            "react", label="React", package="create-react-app", runner=settings.runner,
        )
    )
    registry.register(
        ExternalGeneratorScaffolder(
            "next", label="Next.js", package="create-next-app", runner=settings.runner,
        )
    )
    registry.register(FilesystemScaffolder("express", express.build_layout))
    return registry
