"""
Host session implementations.

The shared modules (protocol.py, selection_filter.py) contain no
host-specific code. Bundled hosts:
- memory_host - scripted in-memory host for tests and replays
- console_host - InquirerPy-driven terminal host
"""

from .console_host import ConsoleHost
from .memory_host import InMemoryHost
from .model_loader import DocumentModel, ElementSpec, load_document_model
from .protocol import CANCELLED, HostSession
from .selection_filter import ElementsOfTypeFilter, matches_type

__all__ = [
    "CANCELLED",
    "HostSession",
    "ElementsOfTypeFilter",
    "matches_type",
    "InMemoryHost",
    "ConsoleHost",
    "DocumentModel",
    "ElementSpec",
    "load_document_model",
]
