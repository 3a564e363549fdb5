"""Exception hierarchy for XML document composition.

Tree, visitor and path operations never raise for structurally valid calls.
Errors are limited to object mapping of malformed object graphs, invalid
configuration and the persistence boundary.
"""

from pathlib import Path
from typing import Optional, Union


class ComposerError(Exception):
    """Base exception for all xml_composer errors."""


class MappingError(ComposerError):
    """Raised when an object cannot be mapped to an entity tree."""

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        field_name: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.type_name = type_name
        self.field_name = field_name


class DocumentWriteError(ComposerError):
    """Raised when rendered text cannot be written to storage.

    The failure is environmental (permissions, missing directory, full device)
    and is not retried.
    """

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        super().__init__(f"Failed to write document to {path}: {reason}")
        self.path = Path(path)
        self.reason = reason
