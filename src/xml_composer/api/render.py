"""Text rendering and persistence of documents.

Output is an XML declaration followed by one tag per line, indented one
``indent`` per depth level. An entity without content and children renders
self-closing. When content is set it is emitted inline and children are not
rendered, even if present.
"""

from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Tuple, Union
from xml.sax.saxutils import escape, quoteattr

from xml_composer.shared import DocumentWriteError, RenderConfig, get_logger
from xml_composer.tree.model import Entity

if TYPE_CHECKING:
    from xml_composer.api.document import Document

logger = get_logger(__name__, component="render")


def _attribute_text(name: str, value: str, config: RenderConfig) -> str:
    if config.escape_special_characters:
        return f" {name}={quoteattr(value)}"
    return f' {name}="{value}"'


def _render_into(entity: Entity, parts: List[str], level: int, config: RenderConfig) -> None:
    # Pending close tags are pushed as strings, entities still to open as tuples
    stack: List[Union[str, Tuple[Entity, int]]] = [(entity, level)]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue

        current, depth = item
        padding = config.indent * depth
        parts.append(padding)
        parts.append(f"<{current.name}")
        for attribute in current.attributes:
            parts.append(_attribute_text(attribute.name, attribute.value, config))

        children = current.children
        if current.content is None and not children:
            parts.append("/>\n")
        elif current.content is not None:
            content = current.content
            if config.escape_special_characters:
                content = escape(content)
            parts.append(f">{content}</{current.name}>\n")
        else:
            parts.append(">\n")
            stack.append(f"{padding}</{current.name}>\n")
            stack.extend((child, depth + 1) for child in reversed(children))


def render_entity(
    entity: Entity, config: Optional[RenderConfig] = None, level: int = 0
) -> str:
    """Render ``entity`` and its visible descendants.

    Args:
        entity: Entity to render
        config: Render configuration (defaults to tab indentation, no escaping)
        level: Indentation level of ``entity``

    Returns:
        Rendered text, one tag per line
    """
    parts: List[str] = []
    _render_into(entity, parts, level, config or RenderConfig())
    return "".join(parts)


def render_declaration(config: Optional[RenderConfig] = None) -> str:
    """Render the XML declaration line."""
    config = config or RenderConfig()
    return f'<?xml version="{config.xml_version}" encoding="{config.encoding}"?>\n'


def render_document(document: "Document", config: Optional[RenderConfig] = None) -> str:
    """Render a whole document, declaration included when configured."""
    config = config or RenderConfig()
    header = render_declaration(config) if config.include_declaration else ""
    return header + render_entity(document.root, config)


def write_document(
    document: "Document",
    path: Union[str, Path],
    config: Optional[RenderConfig] = None,
) -> Path:
    """Render ``document`` and write it to ``path``.

    Returns:
        Path that was written

    Raises:
        DocumentWriteError: If the text cannot be encoded or the file cannot
            be written. Not retried.
    """
    config = config or RenderConfig()
    target = Path(path)
    text = render_document(document, config)
    write_logger = logger.bind(path=str(target), encoding=config.encoding)

    try:
        # Encoding fails before the target is opened, so it is never truncated
        data = text.encode(config.encoding)
        target.write_bytes(data)
    except (OSError, LookupError, UnicodeError) as e:
        write_logger.error("Failed to write document", extra={"error": str(e)})
        raise DocumentWriteError(target, str(e)) from e

    write_logger.info("Document written", extra={"characters": len(text)})
    return target
