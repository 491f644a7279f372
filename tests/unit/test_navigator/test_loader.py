"""Unit tests for loading analyzer results."""

import json
from pathlib import Path

import pytest

from license_inspector.exceptions import GraphConstructionError
from license_inspector.models import Identifier, Severity
from license_inspector.navigator import (
    DependencyGraphNavigator,
    TreeNavigator,
    load_analyzer_result,
)


def write_json(path: Path, data: dict) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadAnalyzerResult:
    """Test building projects and navigators from JSON."""

    def test_scope_trees(self, tmp_path):
        path = write_json(
            tmp_path / "analyzer-result.json",
            {
                "projects": [
                    {
                        "id": "NPM::app:1.0.0",
                        "definition_file_path": "package.json",
                        "declared_licenses": ["MIT"],
                        "scopes": [
                            {
                                "name": "dependencies",
                                "dependencies": [
                                    {
                                        "id": "NPM::a:1.0.0",
                                        "dependencies": [
                                            {
                                                "id": "NPM::b:1.0.0",
                                                "issues": [
                                                    {"source": "NPM", "message": "Missing", "severity": "WARNING"}
                                                ],
                                            }
                                        ],
                                    }
                                ],
                            }
                        ],
                    }
                ]
            },
        )

        result = load_analyzer_result(path)

        assert isinstance(result.navigator, TreeNavigator)
        project = result.projects[0]
        assert project.declared_licenses == frozenset({"MIT"})
        assert result.navigator.all_dependencies(project) == [
            Identifier("NPM", "", "a", "1.0.0"),
            Identifier("NPM", "", "b", "1.0.0"),
        ]
        issues = result.navigator.issues_of(Identifier("NPM", "", "b", "1.0.0"))
        assert [issue.severity for issue in issues] == [Severity.WARNING]

    def test_dependency_graphs(self, tmp_path):
        path = write_json(
            tmp_path / "analyzer-result.json",
            {
                "projects": [{"id": "Maven:com.example:app:1.0", "scope_names": ["compile"]}],
                "dependency_graphs": {
                    "Maven": {
                        "packages": ["Maven:org.a:a:1", "Maven:org.b:b:2"],
                        "scope_roots": {"Maven:com.example:app:1.0:compile": [0]},
                        "edges": {"Maven:com.example:app:1.0:compile": {"0": [1], "1": [0]}},
                        "issues": {"1": [{"message": "Unresolved"}]},
                    }
                },
            },
        )

        result = load_analyzer_result(path)

        assert isinstance(result.navigator, DependencyGraphNavigator)
        assert result.navigator.all_dependencies(result.projects[0]) == [
            Identifier("Maven", "org.a", "a", "1"),
            Identifier("Maven", "org.b", "b", "2"),
        ]

    def test_inconsistent_graph(self, tmp_path):
        path = write_json(
            tmp_path / "analyzer-result.json",
            {
                "projects": [],
                "dependency_graphs": {
                    "Maven": {"packages": [], "scope_roots": {"Maven::app:1:compile": [0]}}
                },
            },
        )

        with pytest.raises(GraphConstructionError):
            load_analyzer_result(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_analyzer_result(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "analyzer-result.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            load_analyzer_result(path)

    def test_missing_fields(self, tmp_path):
        path = write_json(tmp_path / "analyzer-result.json", {"projects": [{"scopes": []}]})

        with pytest.raises(ValueError, match="Invalid analyzer result"):
            load_analyzer_result(path)
