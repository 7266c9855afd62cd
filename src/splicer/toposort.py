# src/splicer/toposort.py
"""Depth-first topological ordering shared by modules and files."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from .logs import getAppLogger


T = TypeVar("T")

# visit states
_UNVISITED = 0
_IN_PROGRESS = 1
_DONE = 2


class CircularDependencyError(RuntimeError):
    """Raised in strict mode when dependencies form a cycle."""

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = list(cycle)
        super().__init__(f"Circular dependency detected: {' -> '.join(self.cycle)}")


@dataclass(eq=False)
class _Node(Generic[T]):
    name: str
    obj: T
    dependencies: list[_Node[T]] = field(default_factory=list)
    state: int = _UNVISITED


def topological_sort(
    items: Iterable[T],
    *,
    get_name: Callable[[T], str],
    get_dependencies: Callable[[T], Iterable[str]],
    strict: bool = False,
    label: str = "item",
) -> list[T]:
    """Order ``items`` so that each one follows everything it depends on.

    Nodes are emitted depth-first, dependencies in their declared order,
    with the items themselves as roots in their given order. The result
    is deterministic and contains every item exactly once.

    Dependency names with no matching item are logged and ignored. A
    dependency cycle is broken where it is first re-entered, unless
    ``strict`` is set, in which case CircularDependencyError is raised.

    Args:
        items: Objects to order.
        get_name: Returns an item's unique name.
        get_dependencies: Returns the names an item depends on.
        strict: Fail on cycles instead of ordering best-effort.
        label: Kind of item, used in log messages.

    Returns:
        A new list with the same items in dependency order.
    """
    logger = getAppLogger()

    nodes: list[_Node[T]] = []
    table: dict[str, _Node[T]] = {}
    for obj in items:
        node = _Node(name=get_name(obj), obj=obj)
        nodes.append(node)
        if node.name in table:
            logger.warning(
                "Duplicate %s name %r; dependencies resolve to the first one",
                label,
                node.name,
            )
            continue
        table[node.name] = node

    for node in nodes:
        for dep_name in get_dependencies(node.obj):
            dependency = table.get(dep_name)
            if dependency is None:
                logger.info(
                    "%s requires %s but it was not found", node.name, dep_name
                )
                continue
            node.dependencies.append(dependency)

    result: list[T] = []

    def emit(root: _Node[T]) -> None:
        # explicit stack of (node, remaining dependencies) frames
        root.state = _IN_PROGRESS
        stack = [(root, iter(root.dependencies))]
        while stack:
            node, pending = stack[-1]
            for dependency in pending:
                if dependency.state == _DONE:
                    continue
                if dependency.state == _IN_PROGRESS:
                    path = [frame_node for frame_node, _ in stack]
                    start = path.index(dependency)
                    cycle = [n.name for n in path[start:]] + [dependency.name]
                    if strict:
                        raise CircularDependencyError(cycle)
                    logger.debug(
                        "[SORT] Breaking %s cycle: %s", label, " -> ".join(cycle)
                    )
                    continue
                dependency.state = _IN_PROGRESS
                stack.append((dependency, iter(dependency.dependencies)))
                break
            else:
                stack.pop()
                node.state = _DONE
                result.append(node.obj)

    for node in nodes:
        if node.state == _UNVISITED:
            emit(node)

    logger.trace(
        "[SORT] %s order: %s", label, ", ".join(get_name(obj) for obj in result)
    )
    return result
