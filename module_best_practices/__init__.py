"""Bundled "module best practices" guide and its pager command.

Importing the package never touches the terminal. ``open_document()`` returns
a fresh readable stream over the guide; only ``display()`` (run by the
``module-best-practices`` command) sends it to a pager.
"""

from .emitter import (
    DOCUMENT_PATH,
    display,
    iter_document,
    iter_text,
    open_document,
    pipe,
    read_document,
)
from .errors import (
    AccessDeniedError,
    DocumentError,
    PagerUnavailableError,
    ResourceNotFoundError,
)

__all__ = [
    "DOCUMENT_PATH",
    "AccessDeniedError",
    "DocumentError",
    "PagerUnavailableError",
    "ResourceNotFoundError",
    "display",
    "iter_document",
    "iter_text",
    "open_document",
    "pipe",
    "read_document",
]
