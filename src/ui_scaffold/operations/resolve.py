"""Transitive resolution of registry dependencies.

The closure is computed breadth-first with an explicit worklist and visited
set, so each component is expanded at most once and the walk terminates on
any finite index. Cycles are then rejected by a depth-first pass over the
closure; a dependency chain longer than the index itself is also treated as
a cycle.
"""

import logging
from collections import deque
from collections.abc import Iterable

from ui_scaffold.exceptions import CyclicDependency, UnknownComponent
from ui_scaffold.models.installation import ResolutionResult
from ui_scaffold.models.registry import RegistryIndex

logger = logging.getLogger(__name__)

_VISITING = 1
_DONE = 2


def resolve(requested: Iterable[str], index: RegistryIndex) -> ResolutionResult:
    """Compute the components and packages needed to install `requested`.

    Args:
        requested: Component names. Order is kept for sequences; sets are sorted
            so the result does not depend on hash order.
        index: Registry index for this run

    Returns:
        ResolutionResult with the closure in first-discovery order

    Raises:
        UnknownComponent: If a requested name or any registry dependency is
            missing from the index. Nothing is resolved partially.
        CyclicDependency: If the closure contains a dependency cycle
    """
    names = _ordered_unique(requested)

    available = [entry.name for entry in index.ui_components()]
    for name in names:
        if name not in index:
            raise UnknownComponent(name, available=available)

    closure = _closure(names, index)
    _ensure_acyclic(closure, index)

    dependencies: set[str] = set()
    dev_dependencies: set[str] = set()
    plugins: set[str] = set()
    for name in closure:
        entry = index.entries[name]
        dependencies.update(entry.dependencies)
        dev_dependencies.update(entry.dev_dependencies)
        plugins.update(entry.tailwind_plugins)

    logger.debug("Resolved %s -> %s", names, closure)
    return ResolutionResult(
        components_to_install=tuple(closure),
        dependencies=frozenset(dependencies),
        dev_dependencies=frozenset(dev_dependencies),
        tailwind_plugins=tuple(sorted(plugins)),
    )


def _ordered_unique(requested: Iterable[str]) -> list[str]:
    if isinstance(requested, (set, frozenset)):
        return sorted(requested)
    return list(dict.fromkeys(requested))


def _closure(names: list[str], index: RegistryIndex) -> list[str]:
    visited: dict[str, None] = {}
    worklist = deque(names)
    while worklist:
        name = worklist.popleft()
        if name in visited:
            continue
        visited[name] = None
        for dep in index.entries[name].registry_dependencies:
            if dep not in index:
                raise UnknownComponent(dep, available=index.names(), required_by=name)
            if dep not in visited:
                worklist.append(dep)
    return list(visited)


def _ensure_acyclic(closure: list[str], index: RegistryIndex) -> None:
    """Depth-first search over the closure, failing on the first back edge."""
    limit = len(index)
    state: dict[str, int] = {}
    for root in closure:
        if root in state:
            continue
        state[root] = _VISITING
        path = [root]
        stack = [iter(index.entries[root].registry_dependencies)]
        while stack:
            dep = next(stack[-1], None)
            if dep is None:
                state[path.pop()] = _DONE
                stack.pop()
                continue
            status = state.get(dep)
            if status == _VISITING:
                raise CyclicDependency([*path[path.index(dep) :], dep])
            if status == _DONE:
                continue
            if len(path) >= limit:
                raise CyclicDependency([*path, dep])
            state[dep] = _VISITING
            path.append(dep)
            stack.append(iter(index.entries[dep].registry_dependencies))
