"""Document API: bulk edits, path queries and object ingestion.

A ``Document`` owns exactly one root entity for its whole lifetime. Every
bulk edit builds the matching visitor and runs it from the root, so it
applies to every matching entity in the document, not just the first.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO, Union

from xml_composer.api.render import render_document, write_document
from xml_composer.mapping import MappingRegistry, ObjectMapper
from xml_composer.shared import ComposerConfig, get_logger
from xml_composer.tree import (
    AttributeAdderVisitor,
    AttributeRemoverVisitor,
    AttributeRenamerVisitor,
    Entity,
    EntityRemoverVisitor,
    EntityRenamerVisitor,
    StatisticsVisitor,
    Visitor,
    XPathPrintVisitor,
)


class Document:
    """An XML document built around a single root entity.

    Example:
        >>> document = Document("plan")
        >>> document.add_object(Course(code="M4310", name="Advanced Programming"))
        >>> document.rename_entity("Course", "course")
        >>> print(document.pretty_print())
    """

    def __init__(
        self,
        root_name: str,
        config: Optional[ComposerConfig] = None,
        registry: Optional[MappingRegistry] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Create a document with a new root entity.

        Args:
            root_name: Name of the root entity
            config: Composition configuration (render and mapping settings)
            registry: Mapping capabilities used by ``add_object``
            correlation_id: Optional correlation ID for request tracking
        """
        self._root = Entity(root_name)
        self.config = config or ComposerConfig()
        self.registry = registry or MappingRegistry()
        self.correlation_id = correlation_id
        self._logger = get_logger(__name__, correlation_id, "document").bind(root_name=root_name)

    @classmethod
    def compose(cls, root_name: str, *objects: Any, **kwargs: Any) -> "Document":
        """Create a document and ingest ``objects`` in order.

        Keyword arguments are passed to the constructor.
        """
        document = cls(root_name, **kwargs)
        for obj in objects:
            document.add_object(obj)
        return document

    @property
    def root(self) -> Entity:
        """The root entity."""
        return self._root

    def accept(self, visitor: Visitor) -> None:
        """Run ``visitor`` over the whole document."""
        self._root.accept(visitor)

    # Bulk edits

    def add_attribute(self, entity_name: str, attribute_name: str, attribute_value: str) -> None:
        """Add an attribute to every entity named ``entity_name``."""
        self._logger.debug(
            "Adding attribute",
            extra={"entity_name": entity_name, "attribute_name": attribute_name},
        )
        self.accept(AttributeAdderVisitor(entity_name, attribute_name, attribute_value))

    def remove_attribute(self, entity_name: str, attribute_name: str) -> None:
        """Remove attributes named ``attribute_name`` from entities named ``entity_name``."""
        self._logger.debug(
            "Removing attribute",
            extra={"entity_name": entity_name, "attribute_name": attribute_name},
        )
        self.accept(AttributeRemoverVisitor(entity_name, attribute_name))

    def rename_attribute(
        self, entity_name: str, old_attribute_name: str, new_attribute_name: str
    ) -> None:
        """Rename attributes of every entity named ``entity_name``."""
        self._logger.debug(
            "Renaming attribute",
            extra={
                "entity_name": entity_name,
                "old_attribute_name": old_attribute_name,
                "new_attribute_name": new_attribute_name,
            },
        )
        self.accept(
            AttributeRenamerVisitor(entity_name, old_attribute_name, new_attribute_name)
        )

    def rename_entity(self, old_name: str, new_name: str) -> None:
        """Rename every entity named ``old_name``."""
        self._logger.debug(
            "Renaming entity", extra={"old_name": old_name, "new_name": new_name}
        )
        self.accept(EntityRenamerVisitor(old_name, new_name))

    def remove_entity(self, entity_name: str) -> None:
        """Detach every entity named ``entity_name``. The root is never removed."""
        self._logger.debug("Removing entity", extra={"entity_name": entity_name})
        self.accept(EntityRemoverVisitor(entity_name))

    # Queries

    def query(self, path: str, visitor: Visitor) -> None:
        """Evaluate micro-XPath ``path`` from the root and visit each match."""
        self._root.query(path, visitor)

    def select(self, path: str) -> List[Entity]:
        """Evaluate micro-XPath ``path`` from the root and return the matches."""
        return self._root.select(path)

    def xpath(self, path: str, stream: Optional[TextIO] = None) -> List[str]:
        """Print a one-line tag for every match of ``path``.

        Returns:
            The printed lines
        """
        visitor = XPathPrintVisitor(stream)
        self.query(path, visitor)
        return visitor.lines

    # Object ingestion

    def add_object(self, obj: Any) -> Entity:
        """Map ``obj`` to an entity subtree and attach it under the root.

        Returns:
            The attached entity

        Raises:
            MappingError: If the object cannot be mapped
        """
        mapper = ObjectMapper(self.registry, self.config.mapping, self.correlation_id)
        entity = mapper.map(obj)
        self._root.add_child(entity)
        return entity

    # Output

    def pretty_print(self) -> str:
        """Render the document as indented XML text."""
        return render_document(self, self.config.render)

    def write_to_file(self, path: Union[str, Path]) -> Path:
        """Write the rendered document to ``path``.

        Raises:
            DocumentWriteError: If the file cannot be written
        """
        return write_document(self, path, self.config.render)

    def statistics(self) -> Dict[str, int]:
        """Count entities and attributes and report the maximum depth."""
        visitor = StatisticsVisitor()
        self.accept(visitor)
        return {
            "total_entities": visitor.total_entities,
            "total_attributes": visitor.total_attributes,
            "max_depth": visitor.max_depth,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert document to dictionary representation."""
        return {
            "root": self._root.to_dict(),
            "statistics": self.statistics(),
        }
