"""Declarative object-to-entity mapping.

Key Components:
    ObjectMapper: Mapping engine turning structured objects into entity trees
    MappingRegistry: Typed registry of per-type and per-field capabilities
    xml_field / xml_entity: Declarative markers read when no registry entry exists
    StringTransformer / XmlBuilder / EntityAdapter: Extension points
"""

from .capabilities import (
    AddAsAttribute,
    AddAsContent,
    DefaultStringTransformer,
    EntityAdapter,
    PercentageTransformer,
    RenameEntityAdapter,
    SortAttributesAdapter,
    SortChildrenAdapter,
    StringTransformer,
    SuffixTransformer,
    XmlBuilder,
)
from .mapper import ObjectMapper
from .markers import FieldSpec, TypeSpec, xml_entity, xml_field
from .registry import MappingRegistry

__all__ = [
    "AddAsAttribute",
    "AddAsContent",
    "DefaultStringTransformer",
    "EntityAdapter",
    "PercentageTransformer",
    "RenameEntityAdapter",
    "SortAttributesAdapter",
    "SortChildrenAdapter",
    "StringTransformer",
    "SuffixTransformer",
    "XmlBuilder",
    "ObjectMapper",
    "FieldSpec",
    "TypeSpec",
    "xml_entity",
    "xml_field",
    "MappingRegistry",
]
