"""Navigation of project dependencies over tree and graph representations."""

from license_inspector.navigator.base import DependencyNavigator, ScopeRef
from license_inspector.navigator.graph import (
    DependencyGraph,
    DependencyGraphNavigator,
    qualify_scope,
)
from license_inspector.navigator.loader import AnalyzerResult, load_analyzer_result
from license_inspector.navigator.tree import TreeNavigator

__all__ = [
    "AnalyzerResult",
    "DependencyGraph",
    "DependencyGraphNavigator",
    "DependencyNavigator",
    "ScopeRef",
    "TreeNavigator",
    "load_analyzer_result",
    "qualify_scope",
]
