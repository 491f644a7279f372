"""Base interface for dependency navigators.

Navigators let callers enumerate the scopes of a project and the packages
reachable from each scope without knowing how the dependencies are stored.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from license_inspector.models import Identifier, Issue, Project


@dataclass(frozen=True)
class ScopeRef:
    """Handle to a scope of a project, as returned by a navigator.

    Attributes:
        project: Identifier of the project owning the scope.
        name: Name of the scope, e.g. "compile".
    """

    project: Identifier
    name: str


class DependencyNavigator(ABC):
    """Abstract base class for dependency navigators.

    Implementations must be safe for concurrent readers and must terminate on
    cyclic dependency data, visiting every package at most once per scope.
    """

    @abstractmethod
    def scopes_of(self, project: Project) -> list[ScopeRef]:
        """Return the scopes of a project in declaration order.

        Args:
            project: The project to inspect.

        Returns:
            One handle per scope; calling this again yields the same handles.
        """
        ...

    @abstractmethod
    def dependencies_of(self, scope: ScopeRef) -> list[Identifier]:
        """Return all packages transitively reachable from a scope.

        Args:
            scope: Handle obtained from scopes_of().

        Returns:
            Identifiers in traversal order, each exactly once.
        """
        ...

    @abstractmethod
    def issues_of(self, id: Identifier) -> list[Issue]:
        """Return the issues recorded for a package, or an empty list."""
        ...

    def scope_dependencies(self, project: Project) -> dict[str, list[Identifier]]:
        """Return the dependencies of every scope of a project, keyed by scope name."""
        return {scope.name: self.dependencies_of(scope) for scope in self.scopes_of(project)}

    def all_dependencies(self, project: Project) -> list[Identifier]:
        """Return the sorted union of the dependencies of all scopes of a project."""
        ids: set[Identifier] = set()
        for scope in self.scopes_of(project):
            ids.update(self.dependencies_of(scope))
        return sorted(ids)
