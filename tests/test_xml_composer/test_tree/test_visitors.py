"""Tests for the visitor engine and the standard visitors."""

import io
from typing import List

from xml_composer.tree import (
    Attribute,
    AttributeAdderVisitor,
    AttributeRemoverVisitor,
    AttributeRenamerVisitor,
    CollectingVisitor,
    Entity,
    EntityRemoverVisitor,
    EntityRenamerVisitor,
    StatisticsVisitor,
    Visitor,
    XPathPrintVisitor,
    format_tag,
)


class RecordingVisitor(Visitor):
    """Visitor recording visited entity names."""

    def __init__(self) -> None:
        self.names: List[str] = []

    def visit(self, entity: Entity) -> None:
        self.names.append(entity.name)


def build_tree() -> Entity:
    """Build root(a(a1, a2), b(x(a)), c)."""
    root = Entity("root")
    a = Entity("a")
    a.add_child(Entity("a1"))
    a.add_child(Entity("a2"))
    b = Entity("b")
    x = Entity("x")
    x.add_child(Entity("a"))
    b.add_child(x)
    root.add_child(a)
    root.add_child(b)
    root.add_child(Entity("c"))
    return root


class TestTraversal:
    """Test pre-order traversal and snapshot safety."""

    def test_pre_order_depth_first_left_to_right(self) -> None:
        """Test visit order is pre-order."""
        root = build_tree()
        visitor = RecordingVisitor()

        root.accept(visitor)

        assert visitor.names == ["root", "a", "a1", "a2", "b", "x", "a", "c"]

    def test_self_removal_preserves_siblings(self) -> None:
        """Test removing the visited entity keeps siblings and their order."""
        root = Entity("root")
        first = Entity("keep1")
        target = Entity("drop")
        target.add_child(Entity("inner"))
        last = Entity("keep2")
        for child in (first, target, last):
            root.add_child(child)
        visitor = RecordingVisitor()

        class RemoveAndRecord(Visitor):
            def visit(self, entity: Entity) -> None:
                visitor.visit(entity)
                EntityRemoverVisitor("drop").visit(entity)

        root.accept(RemoveAndRecord())

        assert root.children == [first, last]
        assert target.parent is None
        assert [child.name for child in target.children] == ["inner"]
        assert "keep2" in visitor.names

    def test_snapshot_taken_before_descending(self) -> None:
        """Test children appended during a visit are not walked in that pass."""
        root = Entity("root")
        root.add_child(Entity("child"))

        class Appender(Visitor):
            def __init__(self) -> None:
                self.visited = 0

            def visit(self, entity: Entity) -> None:
                self.visited += 1
                if entity.name == "child":
                    entity.parent.add_child(Entity("late"))

        appender = Appender()
        root.accept(appender)

        assert appender.visited == 2
        assert [child.name for child in root.children] == ["child", "late"]


class TestAttributeVisitors:
    """Test attribute adder, remover and renamer."""

    def test_adder_targets_every_matching_entity(self) -> None:
        """Test attribute is added to all entities with the target name."""
        root = build_tree()

        root.accept(AttributeAdderVisitor("a", "flag", "yes"))

        flagged = [e for e in root.iter_entities() if e.has_attribute("flag")]
        assert len(flagged) == 2
        assert all(e.name == "a" for e in flagged)

    def test_remover_removes_all_with_name(self) -> None:
        """Test remover drops all matching attributes on matching entities."""
        entity = Entity("item")
        entity.add_attribute("code", "1")
        entity.add_attribute("code", "2")
        entity.add_attribute("other", "x")

        entity.accept(AttributeRemoverVisitor("item", "code"))

        assert entity.attributes == [Attribute("other", "x")]

    def test_remover_ignores_non_matching_entity(self) -> None:
        """Test remover leaves other entities untouched."""
        entity = Entity("item")
        entity.add_attribute("code", "1")

        entity.accept(AttributeRemoverVisitor("other", "code"))

        assert entity.get_attribute("code") is not None

    def test_renamer_appends_renamed_attribute_at_end(self) -> None:
        """Test renamed attributes move to the end with the same value."""
        entity = Entity("item")
        entity.add_attribute("code", "123")
        entity.add_attribute("name", "x")

        entity.accept(AttributeRenamerVisitor("item", "code", "id"))

        assert entity.attributes == [Attribute("name", "x"), Attribute("id", "123")]

    def test_renamer_handles_duplicates_in_order(self) -> None:
        """Test every duplicate is renamed and keeps its value order."""
        entity = Entity("item")
        entity.add_attribute("code", "1")
        entity.add_attribute("keep", "k")
        entity.add_attribute("code", "2")

        entity.accept(AttributeRenamerVisitor("item", "code", "id"))

        assert entity.attributes == [
            Attribute("keep", "k"),
            Attribute("id", "1"),
            Attribute("id", "2"),
        ]

    def test_renamer_without_match_is_noop(self) -> None:
        """Test renamer does nothing when the attribute is absent."""
        entity = Entity("item")
        entity.add_attribute("name", "x")

        entity.accept(AttributeRenamerVisitor("item", "code", "id"))

        assert entity.attributes == [Attribute("name", "x")]


class TestEntityVisitors:
    """Test entity renamer and remover."""

    def test_rename_is_complete(self) -> None:
        """Test every entity named X is renamed at arbitrary depth."""
        root = build_tree()

        root.accept(EntityRenamerVisitor("a", "z"))

        names = [entity.name for entity in root.iter_entities()]
        assert names.count("a") == 0
        assert names.count("z") == 2

    def test_remover_detaches_all_matches(self) -> None:
        """Test all matching entities are detached with their subtrees."""
        root = build_tree()

        root.accept(EntityRemoverVisitor("a"))

        names = [entity.name for entity in root.iter_entities()]
        assert names == ["root", "b", "x", "c"]

    def test_remover_never_removes_root(self) -> None:
        """Test root entity without parent is not affected."""
        root = build_tree()

        root.accept(EntityRemoverVisitor("root"))

        assert root.name == "root"
        assert len(root.children) == 3

    def test_adjacent_matching_siblings_are_all_removed(self) -> None:
        """Test consecutive matching siblings are all detached."""
        root = Entity("root")
        for name in ("x", "x", "y", "x"):
            root.add_child(Entity(name))

        root.accept(EntityRemoverVisitor("x"))

        assert [child.name for child in root.children] == ["y"]


class TestInspectionVisitors:
    """Test print, collecting and statistics visitors."""

    def test_format_tag(self) -> None:
        """Test single-line tag rendering with and without attributes."""
        entity = Entity("item")
        assert format_tag(entity) == "<item />"

        entity.add_attribute("a", "1")
        entity.add_attribute("b", "2")
        assert format_tag(entity) == '<item a="1" b="2"/>'

    def test_xpath_print_visitor_writes_lines(self) -> None:
        """Test print visitor writes to its stream and records lines."""
        stream = io.StringIO()
        visitor = XPathPrintVisitor(stream)
        entity = Entity("item")
        entity.add_attribute("id", "7")

        visitor.visit(entity)

        assert stream.getvalue() == '<item id="7"/>\n'
        assert visitor.lines == ['<item id="7"/>']

    def test_xpath_print_visitor_defaults_to_stdout(self, capsys) -> None:
        """Test print visitor falls back to standard output."""
        XPathPrintVisitor().visit(Entity("item"))

        assert capsys.readouterr().out == "<item />\n"

    def test_collecting_visitor_with_filter(self) -> None:
        """Test collecting visitor records matching entities in order."""
        root = build_tree()
        collector = CollectingVisitor("a")

        root.accept(collector)

        assert len(collector.entities) == 2
        assert collector.entities[0] is root.children[0]

    def test_statistics_visitor(self) -> None:
        """Test entity and attribute counts and max depth."""
        root = build_tree()
        root.children[0].add_attribute("id", "1")
        stats = StatisticsVisitor()

        root.accept(stats)

        assert stats.total_entities == 8
        assert stats.total_attributes == 1
        assert stats.max_depth == 3
