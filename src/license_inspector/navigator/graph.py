"""Compact dependency graphs and the navigator operating on them.

A dependency graph stores every package once in a flat node list and refers
to nodes by index. Scopes are stored under qualified names that embed the
owning project, so one graph can be shared by all projects of a package
manager.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

from license_inspector.exceptions import GraphConstructionError
from license_inspector.models import Identifier, Issue, Project
from license_inspector.navigator.base import DependencyNavigator, ScopeRef

logger = logging.getLogger(__name__)


def qualify_scope(project_id: Identifier, scope_name: str) -> str:
    """Return the key under which a project's scope is stored in a graph."""
    return f"{project_id.to_coordinates()}:{scope_name}"


@dataclass(frozen=True)
class DependencyGraph:
    """A flat, deduplicated dependency graph that may contain cycles.

    Attributes:
        packages: The nodes of the graph.
        scope_roots: Per qualified scope name, the indices of its direct
            dependencies in order.
        edges: Per qualified scope name, the outgoing edges of each node.
        issues: Issues recorded per node index.

    Raises:
        GraphConstructionError: If an index is out of bounds, if edges are
            given for an undeclared scope, if a declared scope has no roots,
            or if a package occurs more than once.
    """

    packages: Sequence[Identifier]
    scope_roots: Mapping[str, Sequence[int]] = field(default_factory=dict)
    edges: Mapping[str, Mapping[int, Sequence[int]]] = field(default_factory=dict)
    issues: Mapping[int, Sequence[Issue]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "packages", tuple(self.packages))
        object.__setattr__(
            self, "scope_roots", {scope: tuple(roots) for scope, roots in self.scope_roots.items()}
        )
        object.__setattr__(
            self,
            "edges",
            {
                scope: {node: tuple(targets) for node, targets in adjacency.items()}
                for scope, adjacency in self.edges.items()
            },
        )
        object.__setattr__(
            self, "issues", {node: tuple(issues) for node, issues in self.issues.items()}
        )
        self._validate()

    def _check_index(self, index: int, context: str) -> None:
        if not isinstance(index, int) or not 0 <= index < len(self.packages):
            raise GraphConstructionError(
                f"Invalid node index {index} in {context}, the graph has "
                f"{len(self.packages)} nodes."
            )

    def _validate(self) -> None:
        counts = Counter(self.packages)
        duplicates = sorted(str(package) for package, count in counts.items() if count > 1)
        if duplicates:
            raise GraphConstructionError(f"Duplicate packages in dependency graph: {duplicates}")

        for scope, roots in self.scope_roots.items():
            if not roots:
                raise GraphConstructionError(f"Scope '{scope}' is declared without any roots.")
            for index in roots:
                self._check_index(index, f"the roots of scope '{scope}'")

        for scope, adjacency in self.edges.items():
            if scope not in self.scope_roots:
                raise GraphConstructionError(f"Edges are given for undeclared scope '{scope}'.")
            for source, targets in adjacency.items():
                self._check_index(source, f"the edges of scope '{scope}'")
                for target in targets:
                    self._check_index(target, f"the edges of scope '{scope}'")

        for index in self.issues:
            self._check_index(index, "the issues")

    @property
    def scopes(self) -> list[str]:
        return list(self.scope_roots)

    def index_of(self, id: Identifier) -> int:
        """Return the node index of a package, or -1 if it is not in the graph."""
        try:
            return self.packages.index(id)
        except ValueError:
            return -1

    def reachable(self, scope: str) -> list[Identifier]:
        """Return the packages reachable from the roots of a qualified scope.

        The traversal is depth-first in root and edge order and tracks visited
        nodes, so cycles end the walk on their second encounter.
        """
        adjacency = self.edges.get(scope, {})
        visited: set[int] = set()
        result: list[Identifier] = []

        stack = list(reversed(self.scope_roots.get(scope, ())))
        while stack:
            node = stack.pop()
            if node in visited:
                continue
            visited.add(node)
            result.append(self.packages[node])
            stack.extend(reversed(adjacency.get(node, ())))

        return result


class DependencyGraphNavigator(DependencyNavigator):
    """Navigates projects whose dependencies live in shared dependency graphs.

    Attributes:
        projects: The navigable projects keyed by identifier.
        graphs: Dependency graphs keyed by package manager name.

    Raises:
        GraphConstructionError: If no graphs are given although a project
            declares scopes.
    """

    def __init__(
        self, projects: Iterable[Project], graphs: Mapping[str, DependencyGraph]
    ) -> None:
        self.projects = {project.id: project for project in projects}
        self.graphs = dict(graphs)

        if not self.graphs and any(p.scope_names for p in self.projects.values()):
            raise GraphConstructionError(
                "Projects declare scopes, but no dependency graphs are available."
            )

        self._issues: dict[Identifier, list[Issue]] = {}
        for graph in self.graphs.values():
            for index, issues in graph.issues.items():
                package_issues = self._issues.setdefault(graph.packages[index], [])
                package_issues.extend(i for i in issues if i not in package_issues)

    def _graph_for(self, scope: ScopeRef):
        qualified = qualify_scope(scope.project, scope.name)
        graph = self.graphs.get(scope.project.type)
        if graph is not None and qualified in graph.scope_roots:
            return graph, qualified

        for graph in self.graphs.values():
            if qualified in graph.scope_roots:
                return graph, qualified

        return None, qualified

    def scopes_of(self, project: Project) -> list[ScopeRef]:
        return [ScopeRef(project.id, name) for name in project.scope_names]

    def dependencies_of(self, scope: ScopeRef) -> list[Identifier]:
        graph, qualified = self._graph_for(scope)
        if graph is None:
            logger.debug("No dependency graph contains scope '%s'", qualified)
            return []
        return graph.reachable(qualified)

    def issues_of(self, id: Identifier) -> list[Issue]:
        return list(self._issues.get(id, []))
