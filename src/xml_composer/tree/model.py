"""Entity/attribute tree model.

An ``Entity`` is the structural unit of a document: a mutable name, optional
inline text content, an ordered attribute list and ordered children with a
non-owning back-reference to the parent. The parent reference is maintained
exclusively by ``add_child``, ``remove_child`` and ``clear_children``.

Attaching never detaches from a previous parent. A node attached to a second
parent without being removed from the first stays reachable from both while
``parent`` reports only the latest one.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional

from xml_composer.tree.xpath import match_path

if TYPE_CHECKING:
    from xml_composer.tree.visitors import Visitor


@dataclass
class Attribute:
    """A mutable name/value pair attached to an entity."""

    name: str
    value: str


@dataclass(eq=False)
class Entity:
    """Represents a single named element in the document tree.

    Equality is identity: two entities with identical names and content are
    still distinct tree nodes.
    """

    name: str
    content: Optional[str] = None
    parent: Optional["Entity"] = field(default=None, init=False, repr=False)
    _children: List["Entity"] = field(default_factory=list, init=False, repr=False)
    _attributes: List[Attribute] = field(default_factory=list, init=False, repr=False)

    # Structural primitives

    def add_child(self, child: "Entity") -> None:
        """Attach ``child`` at the end of this entity's children.

        No cycle check is performed and the child is not removed from any
        previous parent.
        """
        if not isinstance(child, Entity):
            raise TypeError("Child must be an Entity instance")

        child.parent = self
        self._children.append(child)

    def remove_child(self, child: "Entity") -> bool:
        """Detach ``child`` (matched by identity) and clear its parent reference.

        Returns:
            True if the child was present, False otherwise (nothing changes)
        """
        for index, existing in enumerate(self._children):
            if existing is child:
                del self._children[index]
                child.parent = None
                return True
        return False

    def clear_children(self) -> None:
        """Remove all children, clearing each removed child's parent reference."""
        for child in self._children:
            if child.parent is self:
                child.parent = None
        self._children.clear()

    def set_content(self, content: Optional[str]) -> None:
        """Set inline text content. Children are left untouched."""
        self.content = content

    def rename(self, new_name: str) -> None:
        """Rename this entity in place."""
        self.name = new_name

    @property
    def children(self) -> List["Entity"]:
        """Positional copy of the children sequence."""
        return list(self._children)

    @property
    def is_root(self) -> bool:
        """Check if this entity has no parent."""
        return self.parent is None

    # Attributes

    def add_attribute(self, name: str, value: str) -> None:
        """Append an attribute. Duplicate names are permitted."""
        self._attributes.append(Attribute(name, value))

    def add_attribute_object(self, attribute: Attribute) -> None:
        """Append an existing attribute instance."""
        self._attributes.append(attribute)

    def remove_attribute(self, name: str) -> None:
        """Remove every attribute whose name equals ``name``."""
        self._attributes = [attr for attr in self._attributes if attr.name != name]

    def get_attribute(self, name: str) -> Optional[Attribute]:
        """Get the first attribute with ``name``, or None."""
        for attribute in self._attributes:
            if attribute.name == name:
                return attribute
        return None

    def has_attribute(self, name: str) -> bool:
        """Check if entity has an attribute with ``name``."""
        return self.get_attribute(name) is not None

    @property
    def attributes(self) -> List[Attribute]:
        """Copy of the attribute list in insertion order."""
        return list(self._attributes)

    def clear_attributes(self) -> None:
        """Remove all attributes."""
        self._attributes.clear()

    # Traversal and queries

    def accept(self, visitor: "Visitor") -> None:
        """Run ``visitor`` over this subtree in pre-order, depth-first.

        Each entity's children are snapshotted right after the entity is
        visited, so a visitor may detach the entity it is visiting (or its
        siblings) without disturbing the remaining traversal.
        """
        stack: List[Entity] = [self]
        while stack:
            entity = stack.pop()
            visitor.visit(entity)
            stack.extend(reversed(list(entity._children)))

    def query(self, path: str, visitor: "Visitor") -> None:
        """Visit every entity matched by micro-XPath ``path`` from this entity.

        Only matched entities are visited; their descendants are not walked.
        """
        for entity in match_path(self, path):
            visitor.visit(entity)

    def select(self, path: str) -> List["Entity"]:
        """Return the entities matched by micro-XPath ``path``."""
        return match_path(self, path)

    def iter_entities(self) -> Iterator["Entity"]:
        """Iterate over this entity and its descendants in pre-order."""
        stack: List[Entity] = [self]
        while stack:
            entity = stack.pop()
            yield entity
            stack.extend(reversed(list(entity._children)))

    def find_child(self, name: str) -> Optional["Entity"]:
        """Find first direct child with matching name."""
        for child in self._children:
            if child.name == name:
                return child
        return None

    def find_children(self, name: str) -> List["Entity"]:
        """Find all direct children with matching name."""
        return [child for child in self._children if child.name == name]

    def get_depth(self) -> int:
        """Get depth of this entity in the tree (root = 0)."""
        depth = 0
        ancestor = self.parent
        while ancestor is not None:
            depth += 1
            ancestor = ancestor.parent
        return depth

    def get_path(self) -> str:
        """Get slash-separated path of names from the top-most ancestor."""
        names = [self.name]
        ancestor = self.parent
        while ancestor is not None:
            names.append(ancestor.name)
            ancestor = ancestor.parent
        return "/" + "/".join(reversed(names))

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary representation."""
        def _shallow(entity: "Entity") -> Dict[str, Any]:
            result: Dict[str, Any] = {
                "name": entity.name,
                "attributes": [
                    {"name": attr.name, "value": attr.value} for attr in entity._attributes
                ],
            }
            if entity.content is not None:
                result["content"] = entity.content
            return result

        top = _shallow(self)
        stack = [(self, top)]
        while stack:
            entity, result = stack.pop()
            if entity._children:
                children = [_shallow(child) for child in entity._children]
                result["children"] = children
                stack.extend(zip(entity._children, children))

        return top
