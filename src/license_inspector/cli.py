"""Command-line interface for license_inspector.

Provides subcommands for inspecting license expressions, mapping license
names, resolving package license evidence and listing project dependencies.
"""

import asyncio
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from license_inspector.exceptions import LicenseInspectorError, SpdxException
from license_inspector.matcher import FindingsMatcher
from license_inspector.models import Identifier, ResolvedLicenseInfo
from license_inspector.navigator import load_analyzer_result
from license_inspector.providers import StaticLicenseInfoProvider
from license_inspector.resolver import LicenseInfoResolver
from license_inspector.spdx import Strictness, map_license, parse

app = typer.Typer(
    name="license-inspector",
    help="License expression and license evidence analysis tool.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger("license_inspector")


def _setup_logging(verbose: bool) -> None:
    """Configure logging level based on verbosity flag."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger("license_inspector").setLevel(level)


VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
]


@app.command("parse")
def parse_command(
    expression: Annotated[str, typer.Argument(help="SPDX license expression")],
    strictness: Annotated[
        Strictness,
        typer.Option(
            "--strictness",
            "-s",
            envvar="LICENSE_INSPECTOR_STRICTNESS",
            help="Which license ids are accepted",
        ),
    ] = Strictness.ALLOW_ANY,
    verbose: VerboseOption = False,
) -> None:
    """Parse and validate a license expression.

    Prints the canonical form of the expression and its single licenses.
    """
    _setup_logging(verbose)

    try:
        result = parse(expression, strictness)
    except SpdxException as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(f"[bold]Expression:[/bold] {result}")
    licenses = ", ".join(str(license) for license in result.decompose())
    console.print(f"[bold]Licenses:[/bold] {licenses}")


@app.command("map")
def map_command(
    name: Annotated[str, typer.Argument(help="License name or alias, e.g. 'Apache2'")],
    keep_deprecated: Annotated[
        bool,
        typer.Option(
            "--keep-deprecated",
            help="Do not replace deprecated SPDX ids",
        ),
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Map a license name to an SPDX expression."""
    _setup_logging(verbose)

    mapped = map_license(name, map_deprecated=not keep_deprecated)
    if mapped is None:
        err_console.print(f"[red]Unknown license:[/red] {name}")
        raise typer.Exit(code=1)

    console.print(str(mapped))


def _print_resolved(info: ResolvedLicenseInfo) -> None:
    table = Table(title=str(info.id))
    table.add_column("License")
    table.add_column("Sources")
    table.add_column("Declared as")
    table.add_column("Locations")

    for resolved in info.licenses:
        locations = sorted(
            f"{location.path}:{location.start_line}-{location.end_line}"
            for location in resolved.locations
        )
        table.add_row(
            str(resolved.license),
            ", ".join(sorted(source.value for source in resolved.sources)),
            ", ".join(sorted(resolved.original_declared_licenses)),
            "\n".join(locations),
        )

    console.print(table)

    for provenance, copyrights in sorted(
        info.unmatched_copyrights.items(), key=lambda item: str(item[0])
    ):
        console.print(
            f"[yellow]{len(copyrights)} unmatched copyright(s)[/yellow] in {provenance}"
        )

    for issue in info.issues:
        console.print(f"[yellow]{issue.severity.value}:[/yellow] {issue.message}")


@app.command()
def resolve(
    evidence: Annotated[
        Path,
        typer.Argument(
            help="JSON file with license evidence per package",
            exists=True,
            readable=True,
        ),
    ],
    ids: Annotated[
        Optional[list[str]],
        typer.Option(
            "--id",
            "-i",
            help="Package coordinates to resolve (default: all packages)",
        ),
    ] = None,
    tolerance_lines: Annotated[
        int,
        typer.Option(
            "--tolerance-lines",
            min=0,
            help="Lines by which license findings are extended when matching copyrights",
        ),
    ] = 0,
    verbose: VerboseOption = False,
) -> None:
    """Resolve the license information of packages.

    Exit codes:
        0 - All packages resolved
        1 - A package could not be resolved or an error occurred
    """
    _setup_logging(verbose)

    try:
        provider = StaticLicenseInfoProvider.from_json(evidence)
    except LicenseInspectorError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    resolver = LicenseInfoResolver(provider, findings_matcher=FindingsMatcher(tolerance_lines))
    targets = (
        [Identifier.from_coordinates(coordinates) for coordinates in ids]
        if ids
        else sorted(provider.evidence)
    )

    if not targets:
        console.print("[yellow]No packages found in evidence file[/yellow]")
        raise typer.Exit(code=0)

    results = asyncio.run(resolver.resolve_batch(targets))

    failed = []
    for id, info in results.items():
        if info is None:
            failed.append(id)
        else:
            _print_resolved(info)

    if failed:
        err_console.print(f"\n[red]Could not resolve ({len(failed)}):[/red]")
        for id in failed:
            err_console.print(f"  - {id}")
        raise typer.Exit(code=1)

    console.print(f"\n[green]Resolved {len(results)} package(s)[/green]")


@app.command()
def deps(
    analyzer_result: Annotated[
        Path,
        typer.Argument(
            help="JSON file with analyzed projects and their dependencies",
            exists=True,
            readable=True,
        ),
    ],
    verbose: VerboseOption = False,
) -> None:
    """List the dependencies of all projects per scope."""
    _setup_logging(verbose)

    try:
        result = load_analyzer_result(analyzer_result)
    except (ValueError, LicenseInspectorError) as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    if not result.projects:
        console.print("[yellow]No projects found[/yellow]")
        raise typer.Exit(code=0)

    navigator = result.navigator
    for project in result.projects:
        console.print(f"[bold]{project.id}[/bold]")
        for scope, dependencies in navigator.scope_dependencies(project).items():
            console.print(f"  {scope} ({len(dependencies)})")
            for id in dependencies:
                console.print(f"    - {id}")
                for issue in navigator.issues_of(id):
                    console.print(f"      [yellow]{issue.severity.value}:[/yellow] {issue.message}")


if __name__ == "__main__":
    app()
