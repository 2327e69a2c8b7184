"""
Menu definitions for the interactive generate flow.

Options are numbered from 1 in the order they are listed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ProjectType(str, Enum):
    FRONTEND = "frontend"
    BACKEND = "backend"
    FULLSTACK = "fullstack"

    @property
    def includes_frontend(self) -> bool:
        return self in (ProjectType.FRONTEND, ProjectType.FULLSTACK)

    @property
    def includes_backend(self) -> bool:
        return self in (ProjectType.BACKEND, ProjectType.FULLSTACK)


@dataclass(frozen=True)
class MenuOption:
    label: str
    value: Any


@dataclass(frozen=True)
class Menu:
    """A titled, ordered list of options."""

    title: str
    options: tuple[MenuOption, ...]

    def lines(self) -> list[str]:
        """Render the menu as printable lines."""
        return [self.title] + [
            f"{i}. {opt.label}" for i, opt in enumerate(self.options, start=1)
        ]

    def choose(self, number: int) -> MenuOption | None:
        """Return the option for a 1-based number, or None if out of range."""
        if 1 <= number <= len(self.options):
            return self.options[number - 1]
        return None


EXTENSION_MENU = Menu(
    "Select project extension:",
    (
        MenuOption("TypeScript", True),
        MenuOption("JavaScript", False),
    ),
)

PROJECT_TYPE_MENU = Menu(
    "Select project type:",
    (
        MenuOption("Frontend only", ProjectType.FRONTEND),
        MenuOption("Backend only", ProjectType.BACKEND),
        MenuOption("Full-stack (Frontend + Backend)", ProjectType.FULLSTACK),
    ),
)

FRONTEND_MENU = Menu(
    "Select a frontend framework:",
    (
        MenuOption("React", "react"),
        MenuOption("Next.js", "next"),
    ),
)

BACKEND_MENU = Menu(
    "Select a backend framework:",
    (
        MenuOption("Node.js with Express", "express"),
    ),
)
