"""Declarative markers for mapped types and fields.

Field markers travel in ``dataclasses.field`` metadata; type markers are
attached to the class by the ``xml_entity`` decorator.

Example:
    >>> @xml_entity(adapter=SortChildrenAdapter)
    ... @dataclass
    ... class Component:
    ...     name: str = xml_field(builder=AddAsAttribute)
    ...     weight: int = xml_field(transformer=PercentageTransformer,
    ...                             builder=AddAsAttribute)
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, TypeVar

from xml_composer.mapping.capabilities import AdapterLike, BuilderLike, TransformerLike

FIELD_METADATA_KEY = "xml_composer"
TYPE_MARKER_ATTRIBUTE = "__xml_entity__"

T = TypeVar("T", bound=type)


@dataclass(frozen=True)
class FieldSpec:
    """Mapping configuration of one field."""

    name: Optional[str] = None
    transformer: Optional[TransformerLike] = None
    builder: Optional[BuilderLike] = None
    exclude: bool = False


@dataclass(frozen=True)
class TypeSpec:
    """Mapping configuration of one type.

    ``fields`` is an explicit schema descriptor: the ordered field names to map.
    """

    name: Optional[str] = None
    adapter: Optional[AdapterLike] = None
    fields: Optional[Tuple[str, ...]] = None


def xml_field(
    *,
    name: Optional[str] = None,
    transformer: Optional[TransformerLike] = None,
    builder: Optional[BuilderLike] = None,
    exclude: bool = False,
    **kwargs: Any,
) -> Any:
    """Declare a dataclass field carrying mapping markers.

    Remaining keyword arguments are forwarded to ``dataclasses.field``.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[FIELD_METADATA_KEY] = FieldSpec(
        name=name, transformer=transformer, builder=builder, exclude=exclude
    )
    return dataclasses.field(metadata=metadata, **kwargs)


def xml_entity(
    name: Optional[str] = None,
    adapter: Optional[AdapterLike] = None,
    fields: Optional[Tuple[str, ...]] = None,
) -> Callable[[T], T]:
    """Class decorator declaring the type's entity name, adapter and field list."""
    def decorator(cls: T) -> T:
        spec = TypeSpec(
            name=name,
            adapter=adapter,
            fields=tuple(fields) if fields is not None else None,
        )
        setattr(cls, TYPE_MARKER_ATTRIBUTE, spec)
        return cls

    return decorator


def type_marker(cls: type) -> Optional[TypeSpec]:
    """Get the marker declared directly on ``cls`` (not inherited)."""
    return cls.__dict__.get(TYPE_MARKER_ATTRIBUTE)


def field_marker(cls: type, field_name: str) -> Optional[FieldSpec]:
    """Get the marker stored in the metadata of dataclass field ``field_name``."""
    if not dataclasses.is_dataclass(cls):
        return None
    for field_info in dataclasses.fields(cls):
        if field_info.name == field_name:
            return field_info.metadata.get(FIELD_METADATA_KEY)
    return None
