"""Repository maintenance commands.

Each command is a plain class with a ``run()`` method returning the
process exit status; the CLI wires collaborators in and exits.
"""
from __future__ import annotations

from plugin_tools.commands.pubspec_check import Echo, PubspecCheckCommand

__all__ = ["Echo", "PubspecCheckCommand"]
