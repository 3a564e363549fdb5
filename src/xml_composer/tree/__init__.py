"""Entity tree model, visitor engine and micro-XPath matcher.

Key Components:
    Entity: Named tree element with content, ordered attributes and children
    Attribute: Mutable name/value pair
    Visitor: Capability driven over the tree by Entity.accept
    match_path: Exact-name path evaluation used by Entity.query/select
"""

from .model import Attribute, Entity
from .visitors import (
    AttributeAdderVisitor,
    AttributeRemoverVisitor,
    AttributeRenamerVisitor,
    CollectingVisitor,
    EntityRemoverVisitor,
    EntityRenamerVisitor,
    StatisticsVisitor,
    Visitor,
    XPathPrintVisitor,
    format_tag,
)
from .xpath import PATH_SEPARATOR, match_path, split_path

__all__ = [
    "Attribute",
    "Entity",
    "AttributeAdderVisitor",
    "AttributeRemoverVisitor",
    "AttributeRenamerVisitor",
    "CollectingVisitor",
    "EntityRemoverVisitor",
    "EntityRenamerVisitor",
    "StatisticsVisitor",
    "Visitor",
    "XPathPrintVisitor",
    "format_tag",
    "PATH_SEPARATOR",
    "match_path",
    "split_path",
]
