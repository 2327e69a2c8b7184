"""
Domain models — Pydantic types for the scaffolder.

All models are re-exported here for convenient access:

    from node_template.core.models import Action, Receipt, GeneratedFile, Settings
"""

from node_template.core.models.action import Action, Receipt
from node_template.core.models.menu import (
    BACKEND_MENU,
    EXTENSION_MENU,
    FRONTEND_MENU,
    PROJECT_TYPE_MENU,
    Menu,
    MenuOption,
    ProjectType,
)
from node_template.core.models.settings import GenerateOptions, Settings
from node_template.core.models.template import GeneratedFile, ScaffoldLayout

__all__ = [
    # action.py
    "Action",
    "Receipt",
    # menu.py
    "BACKEND_MENU",
    "EXTENSION_MENU",
    "FRONTEND_MENU",
    "Menu",
    "MenuOption",
    "PROJECT_TYPE_MENU",
    "ProjectType",
    # settings.py
    "GenerateOptions",
    "Settings",
    # template.py
    "GeneratedFile",
    "ScaffoldLayout",
]
