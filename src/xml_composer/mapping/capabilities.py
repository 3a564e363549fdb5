"""Extension points consulted by the object mapper.

Three independent capabilities cover formatting, placement and whole-node
cleanup:

* ``StringTransformer`` turns a field value into text.
* ``XmlBuilder`` decides how a field's text is attached to its owning entity.
* ``EntityAdapter`` post-processes a fully mapped entity exactly once.

A capability can be configured as an instance or as a class with a
no-argument constructor. Transformers may also be plain callables.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Union

from xml_composer.tree.model import Entity


class StringTransformer(ABC):
    """Pure value-to-text conversion."""

    @abstractmethod
    def transform(self, value: Any) -> str:
        """Convert ``value`` to its text form."""


class XmlBuilder(ABC):
    """Attach strategy for a mapped field's text value."""

    @abstractmethod
    def build(self, entity: Entity, name: str, value: str) -> None:
        """Attach ``value`` under ``name`` to ``entity``."""


class EntityAdapter(ABC):
    """Post-build structural customization of a mapped entity."""

    @abstractmethod
    def adapt(self, entity: Entity) -> None:
        """Mutate ``entity`` after all of its fields were mapped."""


TransformerLike = Union[StringTransformer, type, Callable[[Any], str]]
BuilderLike = Union[XmlBuilder, type]
AdapterLike = Union[EntityAdapter, type]


class DefaultStringTransformer(StringTransformer):
    """Natural text conversion via ``str``."""

    def transform(self, value: Any) -> str:
        return "" if value is None else str(value)


class SuffixTransformer(StringTransformer):
    """Natural text followed by a fixed suffix."""

    def __init__(self, suffix: str) -> None:
        self.suffix = suffix

    def transform(self, value: Any) -> str:
        return f"{value}{self.suffix}"


class PercentageTransformer(SuffixTransformer):
    """Append a percent sign: ``20`` becomes ``"20%"``."""

    def __init__(self) -> None:
        super().__init__("%")


class AddAsAttribute(XmlBuilder):
    """Add the value as an attribute of the owning entity."""

    def build(self, entity: Entity, name: str, value: str) -> None:
        entity.add_attribute(name, value)


class AddAsContent(XmlBuilder):
    """Add a named child entity whose content is the value."""

    def build(self, entity: Entity, name: str, value: str) -> None:
        child = Entity(name)
        child.set_content(value)
        entity.add_child(child)


class SortChildrenAdapter(EntityAdapter):
    """Reorder children by name (descending by default)."""

    def __init__(self, reverse: bool = True) -> None:
        self.reverse = reverse

    def adapt(self, entity: Entity) -> None:
        ordered = sorted(entity.children, key=lambda child: child.name, reverse=self.reverse)
        entity.clear_children()
        for child in ordered:
            entity.add_child(child)


class SortAttributesAdapter(EntityAdapter):
    """Reorder attributes by name (descending by default)."""

    def __init__(self, reverse: bool = True) -> None:
        self.reverse = reverse

    def adapt(self, entity: Entity) -> None:
        ordered = sorted(entity.attributes, key=lambda attr: attr.name, reverse=self.reverse)
        entity.clear_attributes()
        for attribute in ordered:
            entity.add_attribute_object(attribute)


class RenameEntityAdapter(EntityAdapter):
    """Rename the mapped entity."""

    def __init__(self, new_name: str) -> None:
        self.new_name = new_name

    def adapt(self, entity: Entity) -> None:
        entity.rename(self.new_name)


def _instantiate(capability: Any) -> Any:
    if isinstance(capability, type):
        return capability()
    return capability


def resolve_transformer(transformer: Optional[TransformerLike]) -> Callable[[Any], str]:
    """Return a callable for the configured transformer, or the default one."""
    if transformer is None:
        return DefaultStringTransformer().transform

    # Plain types such as ``str`` are used as callables, not instantiated
    if isinstance(transformer, type) and issubclass(transformer, StringTransformer):
        return transformer().transform
    if isinstance(transformer, StringTransformer):
        return transformer.transform
    if callable(transformer):
        return transformer
    raise TypeError(f"Unsupported transformer: {transformer!r}")


def resolve_builder(builder: Optional[BuilderLike]) -> Optional[XmlBuilder]:
    """Return a builder instance, or None when no builder is configured."""
    if builder is None:
        return None

    instance = _instantiate(builder)
    if not isinstance(instance, XmlBuilder):
        raise TypeError(f"Unsupported builder: {builder!r}")
    return instance


def resolve_adapter(adapter: Optional[AdapterLike]) -> Optional[EntityAdapter]:
    """Return an adapter instance, or None when no adapter is configured."""
    if adapter is None:
        return None

    instance = _instantiate(adapter)
    if not isinstance(instance, EntityAdapter):
        raise TypeError(f"Unsupported adapter: {adapter!r}")
    return instance
