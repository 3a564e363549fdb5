"""Public document API with rendering and persistence.

Key Components:
    Document: Root-owning document with bulk edits, queries and object ingestion
    render_document / write_document: Text rendering and file persistence
"""

from .document import Document
from .render import (
    render_declaration,
    render_document,
    render_entity,
    write_document,
)

__all__ = [
    "Document",
    "render_declaration",
    "render_document",
    "render_entity",
    "write_document",
]
