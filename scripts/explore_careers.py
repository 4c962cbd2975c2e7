#!/usr/bin/env python3
"""
Command-line interface for exploring the career taxonomy.

Loads the career catalog (CAREER_TAXONOMY_PATH or the packaged
career_domains.yaml) and exposes search, recommendation and validation from
a shell. Every command accepts --json to print raw output instead of tables.

Commands:
    search    - Search domains, subfields, careers and internships
    roles     - List or search job roles
    recommend - Recommend domains for skills, interests and a level
    validate  - Validate a domain selection
    check     - Load the catalog and report integrity issues

Usage:
    python scripts/explore_careers.py search "data" --level entry
    python scripts/explore_careers.py roles developer --domain technology-computer-science
    python scripts/explore_careers.py recommend -s Python -s SQL -i "machine learning" --level entry
    python scripts/explore_careers.py validate technology-computer-science --level entry -s JavaScript
    python scripts/explore_careers.py check --strict
"""

import json
import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from pathfinder.contexts.intake import DomainSearchFilters, DomainSelection
from pathfinder.contexts.targeting import DomainRecommender, DomainSearchEngine
from pathfinder.contexts.taxonomy import (
    InvalidTaxonomyError,
    TaxonomyLoadError,
    TaxonomyStore,
)
from pathfinder.contexts.validation import SelectionValidator
from pathfinder.utils.logger import setup_logger
from pathfinder.utils.report_formatter import Column, TableFormatter, format_score

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH") or "outs/logs")

app = typer.Typer(
    add_completion=False,
    help="Explore career domains: search, recommend and validate selections",
    invoke_without_command=True,
)

TaxonomyOption = Annotated[
    Optional[Path],
    typer.Option(
        "--taxonomy",
        "-t",
        help="Catalog YAML (defaults to CAREER_TAXONOMY_PATH or the packaged catalog)",
        dir_okay=False,
        resolve_path=True,
    ),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Print raw JSON instead of tables")]


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


# =============================================================================
# HELPERS
# =============================================================================


def _start_session(command: str, taxonomy: Optional[Path]) -> TaxonomyStore:
    """Set up session logging and load the catalog, exiting 1 on load failure."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    setup_logger(
        context_name=command,
        log_dir=LOGS_PATH / f"explore_{timestamp}",
        extra_provenance={"Taxonomy": taxonomy or os.getenv("CAREER_TAXONOMY_PATH", "packaged")},
        console_level="WARNING",
    )

    try:
        return TaxonomyStore.from_yaml(taxonomy)
    except (TaxonomyLoadError, InvalidTaxonomyError) as e:
        typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _echo_json(data) -> None:
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _echo_validation(result) -> None:
    if result.is_valid:
        typer.secho("✓ Selection is valid", fg=typer.colors.GREEN)
    else:
        typer.secho("✗ Selection is invalid", fg=typer.colors.RED)

    for error in result.errors:
        typer.secho(f"  ERROR   [{error.code}] {error.field}: {error.message}", fg=typer.colors.RED)
    for warning in result.warnings:
        typer.secho(f"  WARNING {warning.field}: {warning.message}", fg=typer.colors.YELLOW)
        if warning.suggestion:
            typer.echo(f"          → {warning.suggestion}")


# =============================================================================
# COMMANDS
# =============================================================================


@app.command()
def search(
    query: Annotated[Optional[str], typer.Argument(help="Free-text query")] = None,
    domain: Annotated[
        Optional[List[str]], typer.Option("--domain", "-d", help="Restrict to domain id (repeatable)")
    ] = None,
    subfield: Annotated[
        Optional[List[str]], typer.Option("--subfield", help="Restrict to subfield id (repeatable)")
    ] = None,
    level: Annotated[
        Optional[List[str]], typer.Option("--level", "-l", help="Career experience level (repeatable)")
    ] = None,
    keyword: Annotated[
        Optional[List[str]], typer.Option("--keyword", "-k", help="Domain keyword (repeatable)")
    ] = None,
    min_salary: Annotated[Optional[float], typer.Option("--min-salary", help="Minimum salary")] = None,
    max_salary: Annotated[Optional[float], typer.Option("--max-salary", help="Maximum salary")] = None,
    remote: Annotated[bool, typer.Option("--remote", help="Require remote careers")] = False,
    hybrid: Annotated[bool, typer.Option("--hybrid", help="Require hybrid careers")] = False,
    onsite: Annotated[bool, typer.Option("--onsite", help="Require onsite careers")] = False,
    limit: Annotated[int, typer.Option("--limit", "-n", help="Rows to display")] = 20,
    taxonomy: TaxonomyOption = None,
    as_json: JsonOption = False,
):
    """Search domains, subfields, careers and internships."""
    store = _start_session("search", taxonomy)

    salary = (
        {"min": min_salary, "max": max_salary}
        if min_salary is not None or max_salary is not None
        else None
    )
    environment = (
        {"remote": remote, "hybrid": hybrid, "onsite": onsite} if remote or hybrid or onsite else None
    )
    filters = DomainSearchFilters.from_dict(
        {
            "query": query,
            "domain_ids": domain or None,
            "subfield_ids": subfield or None,
            "experience_levels": level or None,
            "salary_range": salary,
            "work_environment": environment,
            "keywords": keyword or None,
        }
    )

    response = DomainSearchEngine(store).search(filters)

    if as_json:
        _echo_json(response.to_dict())
        return

    formatter = TableFormatter(
        columns=[
            Column("Type", 11),
            Column("Title", 40),
            Column("Domain", 36),
            Column("Score", 6, align=">"),
        ]
    )
    formatter.add_section_header(f"SEARCH: {query or '(all)'}")
    formatter.add_table_header().add_separator()
    for result in response.results[:limit]:
        formatter.add_row(
            [
                result.entity_type,
                result.title,
                result.parent_domain or "-",
                format_score(result.relevance_score),
            ]
        )
    formatter.add_summary(f"{response.total_count} result(s), showing {min(limit, response.total_count)}")
    if response.suggestions:
        formatter.add_text(f"Try: {', '.join(response.suggestions)}")

    typer.echo(formatter.render())


@app.command()
def roles(
    query: Annotated[Optional[str], typer.Argument(help="Substring to search for")] = None,
    domain: Annotated[Optional[str], typer.Option("--domain", "-d", help="Domain id")] = None,
    level: Annotated[
        Optional[str], typer.Option("--level", "-l", help="Career level (listing only)")
    ] = None,
    taxonomy: TaxonomyOption = None,
    as_json: JsonOption = False,
):
    """List job roles, or search them when a query is given (first 10 matches)."""
    store = _start_session("roles", taxonomy)

    if query:
        found = DomainSearchEngine(store).search_job_roles(query, domain_id=domain)
    else:
        found = store.get_job_roles_by_domain(domain_id=domain, experience_level=level)

    if as_json:
        _echo_json(found)
        return

    if not found:
        typer.secho("No job roles found", fg=typer.colors.YELLOW)
        return
    for role in found:
        typer.echo(f"  {role}")
    typer.echo(f"\n{len(found)} role(s)")


@app.command()
def recommend(
    level: Annotated[str, typer.Option("--level", "-l", help="Target experience level")],
    skill: Annotated[
        Optional[List[str]], typer.Option("--skill", "-s", help="Skill (repeatable)")
    ] = None,
    interest: Annotated[
        Optional[List[str]], typer.Option("--interest", "-i", help="Interest (repeatable)")
    ] = None,
    taxonomy: TaxonomyOption = None,
    as_json: JsonOption = False,
):
    """Recommend domains for a set of skills, interests and an experience level."""
    store = _start_session("recommend", taxonomy)
    recommendations = DomainRecommender(store).recommend(skill or [], interest or [], level)

    if as_json:
        _echo_json([rec.to_dict() for rec in recommendations])
        return

    if not recommendations:
        typer.secho("No domains scored above the match threshold", fg=typer.colors.YELLOW)
        return

    for rank, rec in enumerate(recommendations, start=1):
        typer.secho(
            f"{rank}. {rec.domain.name} ({format_score(rec.match_score)})", bold=True
        )
        for reason in rec.match_reasons:
            typer.echo(f"   • {reason}")
        if rec.recommended_subfields:
            names = ", ".join(subfield.name for subfield in rec.recommended_subfields)
            typer.echo(f"   Subfields: {names}")
        if rec.recommended_careers:
            titles = ", ".join(career.title for career in rec.recommended_careers)
            typer.echo(f"   Careers: {titles}")
        for step, action in enumerate(rec.learning_path, start=1):
            typer.echo(f"   {step}) {action}")
        typer.echo("")


@app.command()
def validate(
    domain: Annotated[str, typer.Argument(help="Domain id")],
    level: Annotated[str, typer.Option("--level", "-l", help="Experience level")],
    subfield: Annotated[Optional[str], typer.Option("--subfield", help="Subfield id")] = None,
    career: Annotated[Optional[str], typer.Option("--career", help="Career example id")] = None,
    skill: Annotated[
        Optional[List[str]], typer.Option("--skill", "-s", help="Selected skill (repeatable)")
    ] = None,
    goal: Annotated[
        Optional[List[str]], typer.Option("--goal", "-g", help="Career goal (repeatable)")
    ] = None,
    taxonomy: TaxonomyOption = None,
    as_json: JsonOption = False,
):
    """Validate a domain selection. Exits 1 when the selection has errors."""
    store = _start_session("validate", taxonomy)

    selection = DomainSelection.from_dict(
        {
            "domain_id": domain,
            "subfield_id": subfield,
            "career_example_id": career,
            "experience_level": level,
            "selected_skills": skill or [],
            "career_goals": goal or [],
        }
    )
    result = SelectionValidator(store).validate_selection(selection)

    if as_json:
        _echo_json(result.to_dict())
    else:
        _echo_validation(result)

    if not result.is_valid:
        raise typer.Exit(code=1)


@app.command()
def check(
    strict: Annotated[
        bool, typer.Option("--strict", help="Exit 1 when integrity issues are found")
    ] = False,
    taxonomy: TaxonomyOption = None,
    as_json: JsonOption = False,
):
    """Load the catalog and report integrity issues."""
    store = _start_session("check", taxonomy)
    issues = store.integrity_issues()

    if as_json:
        _echo_json({"source": str(store.source), "domains": len(store), "issues": issues})
    else:
        typer.echo(f"Catalog: {store.source}")
        typer.echo(f"Domains: {len(store)}")
        if issues:
            typer.secho(f"\n{len(issues)} integrity issue(s):", fg=typer.colors.YELLOW)
            for issue in issues:
                typer.echo(f"  - {issue}")
        else:
            typer.secho("✓ No integrity issues", fg=typer.colors.GREEN)

    if strict and issues:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
