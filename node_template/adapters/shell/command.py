"""
External generator scaffolder — delegate project creation to npx.

The child process inherits this process's stdout/stderr so the user sees
the generator's own output and prompts. The call blocks until the child
exits; there is no timeout.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import time

from node_template.adapters.base import ExecutionContext, Scaffolder
from node_template.core.models.action import Receipt

logger = logging.getLogger(__name__)


class ExternalGeneratorScaffolder(Scaffolder):
    """Run ``<runner> <package> <target>`` in the project root.

    The target directory must be empty (or not exist yet). Files inside it
    are written by the external generator only.
    """

    def __init__(self, name: str, label: str, package: str, runner: str = "npx"):
        self._name = name
        self._label = label
        self._package = package
        self._runner = runner

    @property
    def name(self) -> str:
        return self._name

    def command(self, context: ExecutionContext) -> list[str]:
        return [self._runner, self._package, context.action.target]

    def is_available(self) -> bool:
        return shutil.which(self._runner) is not None

    def unavailable_reason(self) -> str:
        return f"{self._runner} not found on PATH"

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        target_name = context.action.target
        if not target_name:
            return False, "Missing required param: 'target'"

        target = context.target_dir
        if not target.exists():
            return True, ""

        if not target.is_dir():
            return False, f"Error opening directory {target_name}: not a directory"

        try:
            has_entries = any(target.iterdir())
        except OSError as e:
            return False, f"Error opening directory {target_name}: {e}"

        if has_entries:
            return False, (
                f"Directory {target_name} contains files that could conflict. "
                "Please use an empty directory."
            )
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        command = self.command(context)
        cwd = context.project_root

        logger.info("Executing: %s (cwd=%s)", " ".join(command), cwd)
        start = time.monotonic()

        try:
            result = subprocess.run(command, cwd=cwd, check=False)
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Error creating {self._label} app: {e}",
                metadata={"command": command},
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)

        if result.returncode != 0:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Error creating {self._label} app: exit status {result.returncode}",
                duration_ms=elapsed_ms,
                metadata={"command": command, "return_code": result.returncode},
            )

        return Receipt.success(
            adapter=self.name,
            action_id=context.action.id,
            output=f"Frontend project created at: {context.action.target}",
            duration_ms=elapsed_ms,
            metadata={"command": command, "return_code": 0},
        )
