"""Navigator over dependency trees stored inside the projects."""

import logging
from typing import Iterable

from license_inspector.models import Identifier, Issue, PackageReference, Project
from license_inspector.navigator.base import DependencyNavigator, ScopeRef

logger = logging.getLogger(__name__)


class TreeNavigator(DependencyNavigator):
    """Navigates projects whose scopes hold trees of package references.

    The same package may occur many times in the trees, and malformed data may
    even repeat an ancestor below itself; each package is reported once.

    Attributes:
        projects: The navigable projects keyed by identifier.
    """

    def __init__(self, projects: Iterable[Project]) -> None:
        self.projects = {project.id: project for project in projects}
        self._issues = self._collect_issues()

    def _collect_issues(self) -> dict[Identifier, list[Issue]]:
        issues: dict[Identifier, list[Issue]] = {}
        seen: set[int] = set()

        stack: list[PackageReference] = [
            reference
            for project in self.projects.values()
            for scope in project.scopes
            for reference in scope.dependencies
        ]
        while stack:
            reference = stack.pop()
            if id(reference) in seen:
                continue
            seen.add(id(reference))

            for issue in reference.issues:
                package_issues = issues.setdefault(reference.id, [])
                if issue not in package_issues:
                    package_issues.append(issue)
            stack.extend(reference.dependencies)

        return issues

    def scopes_of(self, project: Project) -> list[ScopeRef]:
        return [ScopeRef(project.id, scope.name) for scope in project.scopes]

    def dependencies_of(self, scope: ScopeRef) -> list[Identifier]:
        project = self.projects.get(scope.project)
        if project is None:
            logger.debug("Unknown project %s", scope.project)
            return []

        roots = next(
            (s.dependencies for s in project.scopes if s.name == scope.name), ()
        )

        result: list[Identifier] = []
        visited: set[Identifier] = set()
        stack = list(reversed(roots))
        while stack:
            reference = stack.pop()
            if reference.id in visited:
                continue
            visited.add(reference.id)
            result.append(reference.id)
            stack.extend(reversed(reference.dependencies))

        return result

    def issues_of(self, id: Identifier) -> list[Issue]:
        return list(self._issues.get(id, []))
