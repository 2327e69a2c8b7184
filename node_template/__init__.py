"""node-template-cli — scaffold Node.js frontend and backend projects."""

__version__ = "0.1.0"
