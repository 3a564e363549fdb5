"""Micro-XPath: exact-name path matching over an entity tree.

A path is a sequence of plain names separated by ``/``. There are no
wildcards, predicates, positional indices or recursive steps. Evaluation
starts from a single entity and, for each segment, replaces the working set
with the direct children of every candidate whose name equals the segment.

Segments are compared literally: an empty path, or a leading, trailing or
doubled separator, produces an empty segment that only matches entities
whose name is the empty string.
"""

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from xml_composer.tree.model import Entity

PATH_SEPARATOR = "/"


def split_path(path: str) -> List[str]:
    """Split a micro-XPath expression into its literal segments."""
    return path.split(PATH_SEPARATOR)


def match_path(start: "Entity", path: str) -> List["Entity"]:
    """Evaluate ``path`` from ``start`` and return matches in working-set order.

    Results from different candidates are concatenated in candidate order and
    never deduplicated against each other. A candidate contributes each of its
    physical children at most once per step.

    Args:
        start: Entity the evaluation starts from (not itself matched)
        path: Micro-XPath expression

    Returns:
        Matching entities; empty as soon as any segment matches nothing
    """
    working_set: List["Entity"] = [start]

    for segment in split_path(path):
        next_set: List["Entity"] = []
        for candidate in working_set:
            seen = set()
            for child in candidate.children:
                if child.name == segment and id(child) not in seen:
                    seen.add(id(child))
                    next_set.append(child)
        working_set = next_set
        if not working_set:
            break

    return working_set
