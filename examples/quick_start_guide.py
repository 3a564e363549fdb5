#!/usr/bin/env python3
"""
Quick Start Guide for XML Composer.

This example builds a course plan from plain dataclasses, edits it in bulk,
queries it with micro-XPath paths and writes it to disk.
"""

import sys
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from xml_composer import Document, MappingRegistry
from xml_composer.mapping import (
    AddAsAttribute,
    AddAsContent,
    PercentageTransformer,
    SortAttributesAdapter,
    SortChildrenAdapter,
    xml_entity,
    xml_field,
)


@xml_entity(name="component", adapter=SortAttributesAdapter)
@dataclass
class EvaluationComponent:
    name: str = xml_field(builder=AddAsAttribute)
    weight: int = xml_field(transformer=PercentageTransformer, builder=AddAsAttribute)


@xml_entity(name="fuc")
@dataclass
class Course:
    code: str = xml_field(builder=AddAsAttribute)
    name: str = xml_field(builder=AddAsContent)
    ects: float = xml_field(builder=AddAsContent)
    remarks: str = "none"
    evaluation: List[EvaluationComponent] = field(default_factory=list)


def sample_courses() -> List[Course]:
    return [
        Course(
            "M4310", "Advanced Programming", 6.0,
            evaluation=[EvaluationComponent("Quizzes", 20), EvaluationComponent("Project", 80)],
        ),
        Course(
            "03782", "Dissertation", 42.0,
            evaluation=[EvaluationComponent("Dissertation", 60), EvaluationComponent("Presentation", 20)],
        ),
    ]


def quick_start_example():
    """Quick start example showing basic usage."""

    print("🚀 QUICK START - XML Composer")
    print("=" * 45)

    # Step 1: Map objects into a document
    print("\n📄 Step 1: Composing a Document")
    print("-" * 30)

    document = Document.compose("plan", *sample_courses())
    stats = document.statistics()
    print(f"✅ Created document with {stats['total_entities']} entities")
    print(f"📏 Document depth: {stats['max_depth']}")
    print(document.pretty_print())

    # Step 2: Bulk edits
    print("\n✏️  Step 2: Bulk Edits")
    print("-" * 30)

    document.rename_attribute("fuc", "code", "id")
    document.add_attribute("component", "graded", "yes")
    document.remove_entity("remarks")
    print(document.pretty_print())

    # Step 3: Path queries
    print("\n🔍 Step 3: Micro-XPath Queries")
    print("-" * 30)

    lines = document.xpath("fuc/evaluation/component")
    print(f"✅ {len(lines)} components matched")

    # Step 4: Persist
    print("\n💾 Step 4: Writing to Disk")
    print("-" * 30)

    with tempfile.TemporaryDirectory() as directory:
        written = document.write_to_file(Path(directory) / "plan.xml")
        print(f"✅ Wrote {written.stat().st_size} bytes to {written.name}")


def registry_example():
    """Configure mapping through a registry instead of markers."""

    print("\n🧩 REGISTRY CONFIGURATION")
    print("=" * 45)

    registry = (
        MappingRegistry()
        .register_type(Course, name="course", adapter=SortChildrenAdapter)
        .register_field(Course, "remarks", exclude=True)
    )
    document = Document("plan", registry=registry)
    document.add_object(sample_courses()[0])
    print(document.pretty_print())


def main():
    """Run all examples."""
    quick_start_example()
    registry_example()

    print("\n🎉 Quick start completed!")


if __name__ == "__main__":
    main()
