"""Loading of projects and dependency data from analyzer result files.

An analyzer result is a JSON document listing the analyzed projects. Their
dependencies are given either as per-project scope trees or in a top-level
``dependency_graphs`` section shared by all projects::

    {
        "projects": [
            {
                "id": "Maven:com.example:app:1.0",
                "declared_licenses": ["Apache2"],
                "scope_names": ["compile"]
            }
        ],
        "dependency_graphs": {
            "Maven": {
                "packages": ["Maven:org.slf4j:slf4j-api:2.0.9"],
                "scope_roots": {"Maven:com.example:app:1.0:compile": [0]},
                "edges": {},
                "issues": {}
            }
        }
    }
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from license_inspector.models import (
    Identifier,
    Issue,
    PackageReference,
    Project,
    Scope,
    Severity,
)
from license_inspector.navigator.base import DependencyNavigator
from license_inspector.navigator.graph import DependencyGraph, DependencyGraphNavigator
from license_inspector.navigator.tree import TreeNavigator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalyzerResult:
    """Projects together with the navigator for their dependencies."""

    projects: tuple[Project, ...]
    navigator: DependencyNavigator


def _parse_issue(data: dict[str, Any]) -> Issue:
    return Issue(
        source=data.get("source", ""),
        message=data["message"],
        severity=Severity(data.get("severity", Severity.ERROR.value)),
    )


def _parse_reference(data: dict[str, Any]) -> PackageReference:
    # Scope trees are nested as deep as the dependency chains; parse them
    # bottom-up without recursion.
    parsed: dict[int, PackageReference] = {}
    stack: list[tuple[dict[str, Any], bool]] = [(data, False)]
    while stack:
        node, expanded = stack.pop()
        children = node.get("dependencies", [])
        if not expanded:
            stack.append((node, True))
            stack.extend((child, False) for child in children)
            continue
        parsed[id(node)] = PackageReference(
            id=Identifier.from_coordinates(node["id"]),
            dependencies=tuple(parsed[id(child)] for child in children),
            issues=tuple(_parse_issue(issue) for issue in node.get("issues", [])),
        )
    return parsed[id(data)]


def _parse_project(data: dict[str, Any]) -> Project:
    return Project(
        id=Identifier.from_coordinates(data["id"]),
        definition_file_path=data.get("definition_file_path", ""),
        declared_licenses=frozenset(data.get("declared_licenses", [])),
        scopes=tuple(
            Scope(
                name=scope["name"],
                dependencies=tuple(
                    _parse_reference(reference) for reference in scope.get("dependencies", [])
                ),
            )
            for scope in data.get("scopes", [])
        ),
        scope_names=tuple(data.get("scope_names", [])),
    )


def _parse_graph(data: dict[str, Any]) -> DependencyGraph:
    return DependencyGraph(
        packages=[Identifier.from_coordinates(coordinates) for coordinates in data["packages"]],
        scope_roots=data.get("scope_roots", {}),
        edges={
            scope: {int(source): targets for source, targets in adjacency.items()}
            for scope, adjacency in data.get("edges", {}).items()
        },
        issues={
            int(index): [_parse_issue(issue) for issue in issues]
            for index, issues in data.get("issues", {}).items()
        },
    )


def load_analyzer_result(path: Union[str, Path]) -> AnalyzerResult:
    """Load projects and their dependency navigator from a JSON file.

    Args:
        path: Path of the analyzer result file.

    Returns:
        The projects and a navigator matching the representation used in the
        file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or misses required fields.
        GraphConstructionError: If a dependency graph is inconsistent.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    try:
        projects = tuple(_parse_project(project) for project in data.get("projects", []))
        graphs = {
            name: _parse_graph(graph)
            for name, graph in data.get("dependency_graphs", {}).items()
        }
    except (KeyError, TypeError, AttributeError) as e:
        raise ValueError(f"Invalid analyzer result in {path}: {e!r}") from e

    if "dependency_graphs" in data:
        navigator: DependencyNavigator = DependencyGraphNavigator(projects, graphs)
    else:
        navigator = TreeNavigator(projects)

    logger.info(
        "Loaded %d projects from %s using %s", len(projects), path, type(navigator).__name__
    )

    return AnalyzerResult(projects, navigator)
