"""
Runtime dependency check — is the Node.js executable on PATH?
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass

logger = logging.getLogger(__name__)

RUNTIME_LABEL = "Node.js"
INSTALL_URL = "https://nodejs.org/en/download/"
INSTALL_HINT = f"Please install {RUNTIME_LABEL} from {INSTALL_URL}"


@dataclass
class DependencyStatus:
    """Outcome of looking up one executable."""

    executable: str
    path: str | None = None

    @property
    def available(self) -> bool:
        return self.path is not None


def check_runtime(executable: str = "node") -> DependencyStatus:
    """Resolve *executable* on the search path. Never raises."""
    path = shutil.which(executable)
    if path is None:
        logger.debug("%s not found on PATH", executable)
    else:
        logger.debug("Found %s at %s", executable, path)
    return DependencyStatus(executable=executable, path=path)
