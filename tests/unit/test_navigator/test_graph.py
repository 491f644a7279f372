"""Unit tests for DependencyGraph and DependencyGraphNavigator."""

import pytest

from license_inspector.exceptions import GraphConstructionError
from license_inspector.models import Identifier, Issue, Project
from license_inspector.navigator import (
    DependencyGraph,
    DependencyGraphNavigator,
    ScopeRef,
    qualify_scope,
)

PROJECT = Identifier("Maven", "com.example", "app", "1.0")
A = Identifier("Maven", "com.example", "a", "1.0")
B = Identifier("Maven", "com.example", "b", "1.0")
C = Identifier("Maven", "com.example", "c", "1.0")
COMPILE = qualify_scope(PROJECT, "compile")
TEST = qualify_scope(PROJECT, "test")


@pytest.fixture
def project() -> Project:
    return Project(PROJECT, scope_names=("compile", "test"))


@pytest.fixture
def graph() -> DependencyGraph:
    """Return a graph where compile has the cycle a -> b -> a."""
    return DependencyGraph(
        packages=[A, B, C],
        scope_roots={COMPILE: [0], TEST: [2, 0]},
        edges={COMPILE: {0: [1], 1: [0]}, TEST: {2: [0]}},
        issues={1: [Issue("Maven", "Could not resolve parent POM.")]},
    )


@pytest.fixture
def navigator(project, graph) -> DependencyGraphNavigator:
    return DependencyGraphNavigator([project], {"Maven": graph})


class TestDependencyGraph:
    """Test construction of dependency graphs."""

    def test_qualify_scope(self):
        assert COMPILE == "Maven:com.example:app:1.0:compile"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"scope_roots": {COMPILE: [3]}},
            {"scope_roots": {COMPILE: [-1]}},
            {"scope_roots": {COMPILE: [0]}, "edges": {COMPILE: {0: [5]}}},
            {"scope_roots": {COMPILE: [0]}, "edges": {COMPILE: {7: [0]}}},
            {"scope_roots": {COMPILE: [0]}, "issues": {3: []}},
        ],
    )
    def test_rejects_out_of_bounds_indices(self, kwargs):
        with pytest.raises(GraphConstructionError):
            DependencyGraph(packages=[A, B, C], **kwargs)

    def test_rejects_empty_roots(self):
        """Test that a declared scope without roots is an error."""
        with pytest.raises(GraphConstructionError, match="without any roots"):
            DependencyGraph(packages=[A], scope_roots={COMPILE: []})

    def test_rejects_edges_of_undeclared_scope(self):
        with pytest.raises(GraphConstructionError, match="undeclared"):
            DependencyGraph(packages=[A, B], scope_roots={COMPILE: [0]}, edges={TEST: {0: [1]}})

    def test_rejects_duplicate_packages(self):
        with pytest.raises(GraphConstructionError, match="Duplicate"):
            DependencyGraph(packages=[A, A], scope_roots={COMPILE: [0]})

    def test_reachable_terminates_on_cycles(self, graph):
        assert graph.reachable(COMPILE) == [A, B]
        assert graph.index_of(C) == 2
        assert graph.index_of(PROJECT) == -1


class TestDependencyGraphNavigator:
    """Test navigating projects through a dependency graph."""

    def test_scopes_of(self, navigator, project):
        assert navigator.scopes_of(project) == [
            ScopeRef(PROJECT, "compile"),
            ScopeRef(PROJECT, "test"),
        ]

    def test_cycle_returns_each_package_once(self, navigator):
        """Test that a -> b -> a yields a and b exactly once."""
        assert navigator.dependencies_of(ScopeRef(PROJECT, "compile")) == [A, B]

    def test_traversal_order(self, navigator):
        assert navigator.dependencies_of(ScopeRef(PROJECT, "test")) == [C, A]

    def test_unknown_scope(self, navigator):
        assert navigator.dependencies_of(ScopeRef(PROJECT, "runtime")) == []

    def test_issues_of(self, navigator):
        assert navigator.issues_of(B) == [Issue("Maven", "Could not resolve parent POM.")]
        assert navigator.issues_of(A) == []

    def test_scope_dependencies_and_all_dependencies(self, navigator, project):
        assert navigator.scope_dependencies(project) == {"compile": [A, B], "test": [C, A]}
        assert navigator.all_dependencies(project) == [A, B, C]

    def test_graph_is_found_under_other_names(self, project, graph):
        navigator = DependencyGraphNavigator([project], {"shared": graph})
        assert navigator.dependencies_of(ScopeRef(PROJECT, "compile")) == [A, B]

    def test_requires_graphs_when_scopes_are_declared(self, project):
        with pytest.raises(GraphConstructionError):
            DependencyGraphNavigator([project], {})

    def test_no_graphs_needed_without_scopes(self):
        navigator = DependencyGraphNavigator([Project(PROJECT)], {})
        assert navigator.scopes_of(Project(PROJECT)) == []
