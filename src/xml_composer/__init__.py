"""XML Composer.

Builds, queries and declaratively populates in-memory XML document trees,
then renders them to text.

Progressive API Disclosure:
- Level 1: Document - bulk edits, micro-XPath queries, object ingestion
- Level 2: Entity and visitors - direct tree manipulation and traversal
- Level 3: MappingRegistry, markers and capabilities - declarative mapping
"""

__version__ = "0.1.0"
__author__ = "XML Composer Team"

# Level 1: Document API
from .api import Document

# Level 2: Tree model and visitors
from .tree import Attribute, Entity, Visitor, XPathPrintVisitor

# Level 3: Declarative mapping
from .mapping import (
    AddAsAttribute,
    AddAsContent,
    EntityAdapter,
    MappingRegistry,
    ObjectMapper,
    StringTransformer,
    XmlBuilder,
    xml_entity,
    xml_field,
)

# Configuration and errors
from .shared import (
    ComposerConfig,
    ComposerError,
    DocumentWriteError,
    MappingError,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Document API
    "Document",

    # Tree model
    "Attribute",
    "Entity",
    "Visitor",
    "XPathPrintVisitor",

    # Declarative mapping
    "AddAsAttribute",
    "AddAsContent",
    "EntityAdapter",
    "MappingRegistry",
    "ObjectMapper",
    "StringTransformer",
    "XmlBuilder",
    "xml_entity",
    "xml_field",

    # Configuration and errors
    "ComposerConfig",
    "ComposerError",
    "DocumentWriteError",
    "MappingError",
]
