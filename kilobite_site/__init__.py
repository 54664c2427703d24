"""Configuration layer for the Kilobite blog and portfolio site.

This package holds the typed site settings read by the Astro page build and
exposes the ``site`` CLI used to validate and export them.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from kilobite_site import main
>>> callable(main)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
