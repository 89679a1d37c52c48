"""agentdocs — fetch, classify and cache remote agent documentation."""

from agentdocs.version import __version__

__all__ = ["__version__"]
