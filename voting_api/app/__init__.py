"""
Application package initializer.

The project is organised into small layers: ``repositories`` hold the
in‑memory candidate and vote stores, ``services`` enforce the election
rules on top of them, ``schemas`` define the request and response
payloads and ``api`` exposes the HTTP routes.  ``core`` contains
configuration, logging, errors and the composition root that wires the
stores into the services.
"""

from .main import app  # noqa: F401
