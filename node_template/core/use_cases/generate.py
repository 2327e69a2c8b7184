"""
Generate use case — the interactive scaffolding flow.

    check runtime → extension → project type → frontend and/or backend

Frontend always completes before the backend menu is shown. The first
failed step ends the run; nothing generated earlier is rolled back.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import click

from node_template.adapters.registry import ScaffolderRegistry
from node_template.core.models.action import Action, Receipt
from node_template.core.models.menu import (
    BACKEND_MENU,
    EXTENSION_MENU,
    FRONTEND_MENU,
    PROJECT_TYPE_MENU,
    Menu,
    ProjectType,
)
from node_template.core.models.settings import GenerateOptions
from node_template.core.services.dependency_check import (
    INSTALL_HINT,
    RUNTIME_LABEL,
    check_runtime,
)
from node_template.core.services.prompts import ask_choice

logger = logging.getLogger(__name__)

Ask = Callable[[Menu], Any]


@dataclass
class GenerateResult:
    """Outcome of one generate run."""

    typescript: bool = False
    project_type: ProjectType | None = None
    receipts: list[Receipt] = field(default_factory=list)
    error: str | None = None
    hint: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def frontend_action(framework: str, target: str) -> Action:
    return Action(
        id=f"frontend:{framework}",
        name=f"Scaffold {framework} frontend",
        adapter=framework,
        params={"target": target},
    )


def backend_action(framework: str, target: str, typescript: bool) -> Action:
    return Action(
        id=f"backend:{framework}",
        name=f"Scaffold {framework} backend",
        adapter=framework,
        params={"target": target, "typescript": typescript},
    )


def _report(receipt: Receipt) -> None:
    """Echo what a step created, including partial work from a failed step."""
    for path in receipt.metadata.get("directories", []):
        click.echo(f"Created directory: {path}")
    for path in receipt.metadata.get("files", []):
        click.echo(f"Created file: {path}")
    if not receipt.failed and receipt.output:
        click.echo(receipt.output)


def _run_step(
    result: GenerateResult,
    registry: ScaffolderRegistry,
    action: Action,
    options: GenerateOptions,
) -> bool:
    receipt = registry.execute_action(
        action,
        project_root=options.project_root,
        dry_run=options.dry_run,
    )
    result.receipts.append(receipt)
    _report(receipt)

    if receipt.failed:
        logger.debug("%s failed: %s", action.id, receipt.error)
        result.error = receipt.error
        return False

    logger.info("%s %s in %dms", action.id, receipt.status, receipt.duration_ms)
    return True


def run_generate(
    options: GenerateOptions,
    registry: ScaffolderRegistry,
    ask: Ask = ask_choice,
) -> GenerateResult:
    """Run the interactive flow.

    Args:
        options: Settings plus the pre-seeded language flag.
        registry: Where framework names resolve to scaffolders.
        ask: Menu prompt; returns the chosen option's value.

    Returns:
        GenerateResult. ``error`` is set when a step failed.
    """
    settings = options.settings
    result = GenerateResult(typescript=options.typescript)

    click.echo(f"Checking for {RUNTIME_LABEL}...")
    runtime = check_runtime(settings.runtime)
    if not runtime.available:
        result.error = f"{RUNTIME_LABEL} is not installed."
        result.hint = INSTALL_HINT
        return result
    click.echo(f"{RUNTIME_LABEL} is installed.")

    typescript = bool(ask(EXTENSION_MENU))
    options = options.model_copy(update={"typescript": typescript})
    result.typescript = typescript

    project_type = ProjectType(ask(PROJECT_TYPE_MENU))
    result.project_type = project_type

    if project_type.includes_frontend:
        framework = ask(FRONTEND_MENU)
        action = frontend_action(framework, settings.frontend_dir)
        if not _run_step(result, registry, action, options):
            return result

    if project_type.includes_backend:
        framework = ask(BACKEND_MENU)
        action = backend_action(framework, settings.backend_dir, options.typescript)
        if not _run_step(result, registry, action, options):
            return result

    return result
