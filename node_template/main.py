"""
node-template-cli — CLI entrypoint.

Usage:
    node-template-cli --help
    node-template-cli generate
    node-template-cli generate --typescript
    python -m node_template.main generate --dry-run
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from node_template import __version__
from node_template.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="node-template-cli")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Only log errors.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to node-template.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """A CLI for generating full-stack Node.js project templates."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("NTC_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("NTC_LOG_FILE"),
        log_file_level=os.environ.get("NTC_LOG_FILE_LEVEL"),
    )


@cli.command()
@click.option(
    "--typescript", "-t", is_flag=True, default=False,
    help="Generate project with TypeScript.",
)
@click.option("--dry-run", is_flag=True, help="Check every step but generate nothing.")
@click.option("--mock", is_flag=True, help="Use the mock scaffolder (no real generation).")
@click.pass_context
def generate(
    ctx: click.Context,
    typescript: bool,
    dry_run: bool,
    mock: bool,
) -> None:
    """Generates a full-stack project template."""
    from node_template.adapters.registry import build_registry
    from node_template.core.config.loader import ConfigError, load_settings
    from node_template.core.models.settings import GenerateOptions
    from node_template.core.use_cases.generate import run_generate

    try:
        settings = load_settings(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    registry = build_registry(settings)
    if mock:
        registry.set_mock_mode(True)

    options = GenerateOptions(
        settings=settings,
        typescript=typescript or settings.typescript,
        project_root=str(Path.cwd()),
        dry_run=dry_run,
    )

    result = run_generate(options, registry)

    if not result.ok:
        click.secho(f"❌ {result.error}", fg="red")
        if result.hint:
            click.echo(result.hint)
        sys.exit(1)

    label = "Dry run complete" if dry_run else "Project generated"
    click.secho(f"✅ {label}", fg="green", bold=True)


if __name__ == "__main__":
    cli()
