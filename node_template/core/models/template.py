"""
Generated file model — the entries of a file manifest.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file produced by a template scaffolder.

    Attributes:
        path:    Path relative to the scaffolded project directory.
        content: Full file content.
        mode:    Permission bits applied after writing.
        reason:  Why this file was generated.
    """

    path: str
    content: str
    mode: int = 0o644
    reason: str = ""


class ScaffoldLayout(BaseModel):
    """Directories and files a template scaffolder lays down.

    Both lists hold paths relative to the project directory.
    Directories are created before any file is written.
    """

    directories: list[str]
    files: list[GeneratedFile]

    def duplicate_paths(self) -> list[str]:
        """Return file paths that appear more than once in the manifest."""
        seen: set[str] = set()
        dupes: list[str] = []
        for f in self.files:
            if f.path in seen and f.path not in dupes:
                dupes.append(f.path)
            seen.add(f.path)
        return dupes
