"""Typed registry of mapping capabilities.

The registry is populated once at a composition root and handed to the
mapper explicitly. For every type and field it resolves, in order:

1. an entry registered on the registry,
2. the marker declared on the type or dataclass field,
3. the documented default (type name, natural text, child with content).

A registered entry replaces the marker as a whole.
"""

import dataclasses
import inspect
from typing import Dict, List, Optional, Sequence, Tuple

from xml_composer.mapping.capabilities import AdapterLike, BuilderLike, TransformerLike
from xml_composer.mapping.markers import FieldSpec, TypeSpec, field_marker, type_marker

_DEFAULT_TYPE_SPEC = TypeSpec()
_DEFAULT_FIELD_SPEC = FieldSpec()


class MappingRegistry:
    """Registry mapping type and field identity to mapping capabilities."""

    def __init__(self) -> None:
        self._types: Dict[type, TypeSpec] = {}
        self._fields: Dict[Tuple[type, str], FieldSpec] = {}

    def register_type(
        self,
        cls: type,
        *,
        name: Optional[str] = None,
        adapter: Optional[AdapterLike] = None,
        fields: Optional[Sequence[str]] = None,
    ) -> "MappingRegistry":
        """Register entity name, post-build adapter and field list for ``cls``.

        Returns:
            The registry itself, so registrations can be chained
        """
        self._types[cls] = TypeSpec(
            name=name,
            adapter=adapter,
            fields=tuple(fields) if fields is not None else None,
        )
        return self

    def register_field(
        self,
        cls: type,
        field_name: str,
        *,
        name: Optional[str] = None,
        transformer: Optional[TransformerLike] = None,
        builder: Optional[BuilderLike] = None,
        exclude: bool = False,
    ) -> "MappingRegistry":
        """Register name override, transformer, builder or exclusion for a field."""
        self._fields[(cls, field_name)] = FieldSpec(
            name=name, transformer=transformer, builder=builder, exclude=exclude
        )
        return self

    def is_registered(self, cls: type) -> bool:
        """Check if ``cls`` has an explicit type entry."""
        return cls in self._types

    def type_spec(self, cls: type) -> TypeSpec:
        """Resolve the type configuration for ``cls``."""
        if cls in self._types:
            return self._types[cls]
        return type_marker(cls) or _DEFAULT_TYPE_SPEC

    def field_spec(self, cls: type, field_name: str) -> FieldSpec:
        """Resolve the field configuration for ``cls.field_name``."""
        key = (cls, field_name)
        if key in self._fields:
            return self._fields[key]
        return field_marker(cls, field_name) or _DEFAULT_FIELD_SPEC

    def entity_name(self, cls: type) -> str:
        """Resolve the entity name for instances of ``cls``."""
        return self.type_spec(cls).name or cls.__name__

    def field_name(self, cls: type, field_name: str) -> str:
        """Resolve the node or attribute name for ``cls.field_name``."""
        return self.field_spec(cls, field_name).name or field_name

    def field_names(self, cls: type) -> List[str]:
        """Resolve the ordered field names of ``cls``.

        An explicit field list wins, then dataclass declaration order, then
        the parameter order of ``__init__``.
        """
        declared = self.type_spec(cls).fields
        if declared is not None:
            return list(declared)

        if dataclasses.is_dataclass(cls):
            return [field_info.name for field_info in dataclasses.fields(cls)]

        if cls.__init__ is object.__init__:
            return []

        try:
            signature = inspect.signature(cls.__init__)
        except (TypeError, ValueError):
            return []

        return [
            name
            for name, parameter in signature.parameters.items()
            if name != "self"
            and parameter.kind not in (
                inspect.Parameter.VAR_POSITIONAL,
                inspect.Parameter.VAR_KEYWORD,
            )
        ]
