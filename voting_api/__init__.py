"""
Top‑level package for the school election Voting API.

This file makes ``voting_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``voting_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
