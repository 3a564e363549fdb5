"""Visitor engine for whole-document bulk operations.

A visitor exposes a single ``visit(entity)`` operation invoked for its side
effect. ``Entity.accept`` drives visitors in pre-order, depth-first,
left-to-right, snapshotting children before descending. Every standard
visitor is total: when the match predicate is false it does nothing.
"""

import sys
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO

from xml_composer.tree.model import Entity


class Visitor(ABC):
    """Capability invoked once per visited entity."""

    @abstractmethod
    def visit(self, entity: Entity) -> None:
        """Act on ``entity``."""


class AttributeAdderVisitor(Visitor):
    """Append an attribute to every entity named ``entity_name``."""

    def __init__(self, entity_name: str, attribute_name: str, attribute_value: str) -> None:
        self.entity_name = entity_name
        self.attribute_name = attribute_name
        self.attribute_value = attribute_value

    def visit(self, entity: Entity) -> None:
        if entity.name == self.entity_name:
            entity.add_attribute(self.attribute_name, self.attribute_value)


class AttributeRemoverVisitor(Visitor):
    """Remove all attributes named ``attribute_name`` from matching entities."""

    def __init__(self, entity_name: str, attribute_name: str) -> None:
        self.entity_name = entity_name
        self.attribute_name = attribute_name

    def visit(self, entity: Entity) -> None:
        if entity.name == self.entity_name:
            entity.remove_attribute(self.attribute_name)


class AttributeRenamerVisitor(Visitor):
    """Rename attributes on matching entities.

    Renamed attributes are removed and re-appended with the same value, so
    they move to the end of the attribute list.
    """

    def __init__(self, entity_name: str, old_attribute_name: str, new_attribute_name: str) -> None:
        self.entity_name = entity_name
        self.old_attribute_name = old_attribute_name
        self.new_attribute_name = new_attribute_name

    def visit(self, entity: Entity) -> None:
        if entity.name != self.entity_name:
            return

        values = [
            attribute.value
            for attribute in entity.attributes
            if attribute.name == self.old_attribute_name
        ]
        if not values:
            return

        entity.remove_attribute(self.old_attribute_name)
        for value in values:
            entity.add_attribute(self.new_attribute_name, value)


class EntityRenamerVisitor(Visitor):
    """Rename every entity named ``old_name``."""

    def __init__(self, old_name: str, new_name: str) -> None:
        self.old_name = old_name
        self.new_name = new_name

    def visit(self, entity: Entity) -> None:
        if entity.name == self.old_name:
            entity.rename(self.new_name)


class EntityRemoverVisitor(Visitor):
    """Detach every entity named ``entity_name`` from its parent.

    An entity without a parent (the document root) is never removed.
    """

    def __init__(self, entity_name: str) -> None:
        self.entity_name = entity_name

    def visit(self, entity: Entity) -> None:
        if entity.name == self.entity_name and entity.parent is not None:
            entity.parent.remove_child(entity)


def format_tag(entity: Entity) -> str:
    """Render a single-line self-closing tag with the entity's attributes.

    The name is always followed by a space: ``<item />`` without attributes,
    ``<item a="1" b="2"/>`` with them.
    """
    attributes = " ".join(f'{attr.name}="{attr.value}"' for attr in entity.attributes)
    return f"<{entity.name} {attributes}/>"


class XPathPrintVisitor(Visitor):
    """Emit a one-line tag for every visited entity.

    Lines go to ``stream`` (standard output when None, resolved at visit time)
    and are also kept in ``lines``.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream
        self.lines: List[str] = []

    def visit(self, entity: Entity) -> None:
        line = format_tag(entity)
        self.lines.append(line)
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(line + "\n")


class CollectingVisitor(Visitor):
    """Record visited entities, optionally only those named ``entity_name``."""

    def __init__(self, entity_name: Optional[str] = None) -> None:
        self.entity_name = entity_name
        self.entities: List[Entity] = []

    def visit(self, entity: Entity) -> None:
        if self.entity_name is None or entity.name == self.entity_name:
            self.entities.append(entity)


class StatisticsVisitor(Visitor):
    """Count entities and attributes and track the deepest visited entity."""

    def __init__(self) -> None:
        self.total_entities = 0
        self.total_attributes = 0
        self.max_depth = 0

    def visit(self, entity: Entity) -> None:
        self.total_entities += 1
        self.total_attributes += len(entity.attributes)
        self.max_depth = max(self.max_depth, entity.get_depth())
