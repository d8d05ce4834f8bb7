"""CLI package.

The ``cli`` sub-package contains the Click application and all
command wiring. It should import only from the public API of the
parent package's sub-packages, never reach into private helpers.
"""
from __future__ import annotations
