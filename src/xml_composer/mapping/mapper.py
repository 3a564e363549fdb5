"""Object-to-entity mapping engine.

Converts structured values (dataclasses, registered types and plain classes
with named fields) into entity subtrees. Every decision the algorithm makes
is looked up in a ``MappingRegistry``:

1. The entity is named after the type, or its configured name override.
2. Fields are visited in declared order. ``None`` values and excluded fields
   contribute nothing.
3. Collection fields become a wrapper entity holding one mapped subtree per
   element. Builder fields hand their transformed text to the builder. Any
   other field becomes a child entity whose content is the transformed text.
4. The type's adapter, if any, runs once on the assembled entity.
"""

import dataclasses
import datetime
import decimal
import enum
import fractions
import uuid
from pathlib import PurePath
from typing import Any, Optional

from xml_composer.mapping.capabilities import (
    DefaultStringTransformer,
    resolve_adapter,
    resolve_builder,
    resolve_transformer,
)
from xml_composer.mapping.markers import type_marker
from xml_composer.mapping.registry import MappingRegistry
from xml_composer.shared import MappingConfig, MappingError, get_logger
from xml_composer.tree.model import Entity

COLLECTION_TYPES = (list, tuple, set, frozenset)

SCALAR_TYPES = (
    str,
    bytes,
    int,
    float,
    complex,
    bool,
    enum.Enum,
    decimal.Decimal,
    fractions.Fraction,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    uuid.UUID,
    PurePath,
)


class ObjectMapper:
    """Maps arbitrary structured objects to entity trees."""

    def __init__(
        self,
        registry: Optional[MappingRegistry] = None,
        config: Optional[MappingConfig] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Initialize the mapper.

        Args:
            registry: Capability registry; an empty one falls back to markers
            config: Mapping behavior configuration
            correlation_id: Optional correlation ID for request tracking
        """
        self.registry = registry or MappingRegistry()
        self.config = config or MappingConfig()
        self.correlation_id = correlation_id
        self._logger = get_logger(__name__, correlation_id, "mapper")
        self._default_transformer = DefaultStringTransformer()

    def map(self, obj: Any) -> Entity:
        """Map ``obj`` to a detached entity subtree.

        Raises:
            MappingError: If the object graph is deeper than ``max_depth``
                (typically a cycle) or a configured capability is invalid
        """
        logger = self._logger.bind(type_name=type(obj).__name__)
        logger.debug("Mapping object")
        entity = self._map_value(obj, depth=0)
        logger.debug("Mapped object to entity", extra={"entity_name": entity.name})
        return entity

    def is_structured(self, value: Any) -> bool:
        """Check whether ``value`` is mapped field by field."""
        if isinstance(value, SCALAR_TYPES):
            return False
        cls = type(value)
        if dataclasses.is_dataclass(cls):
            return True
        if self.registry.is_registered(cls) or type_marker(cls) is not None:
            return True
        return hasattr(value, "__dict__")

    def _map_value(self, obj: Any, depth: int) -> Entity:
        cls = type(obj)
        if depth > self.config.max_depth:
            raise MappingError(
                f"Maximum mapping depth {self.config.max_depth} exceeded",
                type_name=cls.__name__,
            )

        entity = Entity(self.registry.entity_name(cls))

        if self.is_structured(obj):
            for field_name in self.registry.field_names(cls):
                self._map_field(obj, cls, field_name, entity, depth)
        else:
            entity.set_content(self._default_transformer.transform(obj))

        try:
            adapter = resolve_adapter(self.registry.type_spec(cls).adapter)
        except TypeError as e:
            raise MappingError(str(e), type_name=cls.__name__) from e
        if adapter is not None:
            adapter.adapt(entity)

        return entity

    def _map_field(
        self, obj: Any, cls: type, field_name: str, entity: Entity, depth: int
    ) -> None:
        spec = self.registry.field_spec(cls, field_name)
        if spec.exclude:
            return

        value = getattr(obj, field_name, None)
        if value is None:
            return

        name = spec.name or field_name

        if isinstance(value, COLLECTION_TYPES):
            items = [item for item in value if item is not None]
            if not items and self.config.skip_empty_collections:
                return
            wrapper = Entity(name)
            for item in items:
                wrapper.add_child(self._map_value(item, depth + 1))
            entity.add_child(wrapper)
            return

        try:
            transform = resolve_transformer(spec.transformer)
            builder = resolve_builder(spec.builder)
        except TypeError as e:
            raise MappingError(str(e), type_name=cls.__name__, field_name=field_name) from e

        text = transform(value)
        if builder is not None:
            builder.build(entity, name, text)
            return

        child = Entity(name)
        child.set_content(text)
        entity.add_child(child)
