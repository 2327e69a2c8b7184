"""
Express backend generator — the static layout of a minimal Express app.

Produces a ``ScaffoldLayout``; nothing here touches the filesystem.
"""

from __future__ import annotations

import json

from node_template.core.models.template import GeneratedFile, ScaffoldLayout

EXPRESS_VERSION = "^4.17.1"

BACKEND_DIRS = (
    "src/controllers",
    "src/routes",
    "src/models",
)

_SAMPLE_APP = """\
const express = require('express');
const app = express();

app.get('/', (req, res) => {
  res.send('Hello from Express!');
});

app.listen(3000, () => {
  console.log('Server is running on port 3000');
});
"""


def sample_app() -> str:
    """Entry-point source. Identical for the .js and .ts variants."""
    return _SAMPLE_APP


def package_json() -> str:
    """Manifest declaring the Express dependency."""
    manifest = {
        "name": "express-app",
        "version": "1.0.0",
        "dependencies": {
            "express": EXPRESS_VERSION,
        },
    }
    return json.dumps(manifest, indent=2) + "\n"


def build_layout(typescript: bool = False) -> ScaffoldLayout:
    """Directories and file manifest for an Express backend.

    Args:
        typescript: Name the entry point ``src/index.ts`` instead of
            ``src/index.js``.
    """
    ext = ".ts" if typescript else ".js"
    return ScaffoldLayout(
        directories=list(BACKEND_DIRS),
        files=[
            GeneratedFile(
                path=f"src/index{ext}",
                content=sample_app(),
                reason="Express application entry point",
            ),
            GeneratedFile(
                path="package.json",
                content=package_json(),
                reason="npm manifest with the express dependency",
            ),
        ],
    )
