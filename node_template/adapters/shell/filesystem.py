"""
Filesystem scaffolder — lay down a template layout on disk.

Directories first, then files, in manifest order. The first failure stops
the run; anything already created stays on disk and is listed in the
receipt metadata.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path, PurePosixPath

from node_template.adapters.base import ExecutionContext, Scaffolder
from node_template.core.models.action import Receipt
from node_template.core.models.template import ScaffoldLayout

logger = logging.getLogger(__name__)

DIR_MODE = 0o755

LayoutBuilder = Callable[..., ScaffoldLayout]


def _is_contained(rel: str) -> bool:
    path = PurePosixPath(rel)
    return bool(rel) and not path.is_absolute() and ".." not in path.parts


class FilesystemScaffolder(Scaffolder):
    """Write the layout returned by *build_layout* under the target directory.

    ``build_layout`` is called with ``typescript=<bool>`` taken from the
    execution context.
    """

    def __init__(self, name: str, build_layout: LayoutBuilder):
        self._name = name
        self._build_layout = build_layout

    @property
    def name(self) -> str:
        return self._name

    def is_available(self) -> bool:
        return True

    def layout(self, context: ExecutionContext) -> ScaffoldLayout:
        return self._build_layout(typescript=context.typescript)

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        if not context.action.target:
            return False, "Missing required param: 'target'"

        layout = self.layout(context)
        for rel in [*layout.directories, *(f.path for f in layout.files)]:
            if not _is_contained(rel):
                return False, f"Path escapes the project directory: {rel}"

        dupes = layout.duplicate_paths()
        if dupes:
            return False, f"Duplicate files in manifest: {', '.join(dupes)}"

        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        layout = self.layout(context)
        display_root = Path(context.action.target)
        target = context.target_dir

        created_dirs: list[str] = []
        created_files: list[str] = []

        def _failed(error: str) -> Receipt:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=error,
                metadata={"directories": created_dirs, "files": created_files},
            )

        for rel in layout.directories:
            shown = str(display_root / rel)
            try:
                (target / rel).mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
            except OSError as e:
                return _failed(f"Error creating directory {shown}: {e}")
            logger.debug("Created directory %s", target / rel)
            created_dirs.append(shown)

        for f in layout.files:
            shown = str(display_root / f.path)
            path = target / f.path
            try:
                path.write_text(f.content, encoding="utf-8")
                os.chmod(path, f.mode)
            except OSError as e:
                return _failed(f"Error creating file {shown}: {e}")
            logger.debug("Wrote %d bytes to %s", len(f.content), path)
            created_files.append(shown)

        return Receipt.success(
            adapter=self.name,
            action_id=context.action.id,
            output=f"Backend project created at: {display_root}",
            metadata={"directories": created_dirs, "files": created_files},
        )
