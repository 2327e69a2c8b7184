"""Scaffolders — the tools that actually create projects.

Public re-exports for convenient access.
"""

from node_template.adapters.base import ExecutionContext, Scaffolder
from node_template.adapters.mock import MockScaffolder
from node_template.adapters.registry import ScaffolderRegistry, build_registry

__all__ = [
    "ExecutionContext",
    "MockScaffolder",
    "Scaffolder",
    "ScaffolderRegistry",
    "build_registry",
]
