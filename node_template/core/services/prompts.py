"""
Prompt engine — numbered menus read from standard input.

The user types the number of an option. Anything that is not a number
in range prints an error and shows the same menu again, as many times
as needed. End of input raises ``click.Abort``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import click

from node_template.core.models.menu import Menu, MenuOption

logger = logging.getLogger(__name__)

INVALID_OPTION = "Invalid option. Please select a valid number."


def parse_choice(raw: str, menu: Menu) -> MenuOption | None:
    """Map raw user input to a menu option, or None if it is not valid."""
    try:
        number = int(raw.strip())
    except ValueError:
        return None
    return menu.choose(number)


def read_line() -> str:
    """Read one answer from the terminal."""
    return click.prompt(">", prompt_suffix=" ", type=str)


def ask_choice(menu: Menu, read: Callable[[], str] = read_line) -> Any:
    """Show *menu* until a valid option is entered; return its value."""
    while True:
        for line in menu.lines():
            click.echo(line)

        raw = read()
        option = parse_choice(raw, menu)
        if option is not None:
            logger.debug("%s -> %s", menu.title, option.label)
            return option.value

        logger.debug("Rejected input %r for %r", raw, menu.title)
        click.echo(INVALID_OPTION)
