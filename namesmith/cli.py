"""namesmith CLI - generate domain names for an idea and check their availability."""

import argparse
import asyncio
import dataclasses
import sys
from enum import Enum

from dynaconf import ValidationError
from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn, TimeRemainingColumn
from rich.table import Table
from rich.text import Text

from namesmith.config import DispatchPolicy, settings
from namesmith.dispatcher import check_availability
from namesmith.exporter import export_results
from namesmith.generator import WordLibrary, generate_candidates, is_well_formed
from namesmith.logs import configure_logging
from namesmith.results import DomainCheckResult
from namesmith.suggest import suggest_domains

console = Console()


class Verdict(Enum):
    AVAILABLE = "available"
    PREMIUM = "premium"
    ERROR = "error"
    TAKEN = "taken"


STATUS_STYLES = {
    Verdict.AVAILABLE: "bold green",
    Verdict.PREMIUM: "magenta",
    Verdict.ERROR: "yellow",
    Verdict.TAKEN: "red",
}


def verdict(result: DomainCheckResult) -> Verdict:
    if result.error_message is not None:
        return Verdict.ERROR
    if result.premium:
        return Verdict.PREMIUM
    if result.available:
        return Verdict.AVAILABLE
    return Verdict.TAKEN


def sort_results(results: list[DomainCheckResult]) -> list[DomainCheckResult]:
    """Sort results by verdict (available, premium, error, taken), then alphabetically."""
    order = {
        Verdict.AVAILABLE: 0,
        Verdict.PREMIUM: 1,
        Verdict.ERROR: 2,
        Verdict.TAKEN: 3,
    }
    return sorted(results, key=lambda r: (order[verdict(r)], r.domain))


def _create_progress(label: str, *, output_console: Console) -> Progress:
    return Progress(
        TextColumn(f"[bold blue]{label}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeRemainingColumn(),
        console=output_console,
    )


def display_results(
    results: list[DomainCheckResult],
    output_console: Console | None = None,
) -> None:
    """Display results to the terminal using rich.

    Args:
        results: List of DomainCheckResult objects.
        output_console: Optional Console for output (used in testing).
    """
    out = output_console or console
    verdicts = [verdict(r) for r in results]
    has_mock = any(r.source == "mock" for r in results)

    table = Table(title="Domain Availability", show_lines=False)
    table.add_column("Domain", style="bold")
    table.add_column("Status")
    table.add_column("Price", justify="right")
    table.add_column("Notes")

    for r in sort_results(results):
        v = verdict(r)
        domain_style = "bold green" if v in (Verdict.AVAILABLE, Verdict.PREMIUM) else ""
        price = f"${r.price:,.2f}" if r.price is not None else ""
        notes = r.error_message or ("simulated" if r.source == "mock" else "")
        table.add_row(
            Text(r.domain, style=domain_style),
            Text(v.value, style=STATUS_STYLES[v]),
            price,
            notes,
        )

    out.print(table)

    available = sum(1 for v in verdicts if v in (Verdict.AVAILABLE, Verdict.PREMIUM))
    taken = verdicts.count(Verdict.TAKEN)
    errors = verdicts.count(Verdict.ERROR)

    summary = Text()
    summary.append(f"Total: {len(results)}", style="bold")
    summary.append(" | ")
    summary.append(f"Available: {available}", style="bold green")
    summary.append(" | ")
    summary.append(f"Taken: {taken}", style="red")
    summary.append(" | ")
    summary.append(f"Errors: {errors}", style="yellow")
    out.print(summary)
    if has_mock:
        out.print("[dim]Some results are simulated; no registrar was used for them.[/dim]")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="namesmith",
        description="Generate domain names for a project idea and check their availability.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate domain candidates from keywords")
    gen.add_argument("keywords", nargs="+", metavar="KEYWORD")
    gen.add_argument("--tld", nargs="+", metavar="TLD", help="TLDs to use (e.g. --tld .com .io)")
    gen.add_argument("--vibe", help="The feel of the project (e.g. fun, minimal)")
    gen.add_argument("--max", type=int, dest="max_results", help="Maximum candidates")

    check = sub.add_parser("check", help="Check availability of specific domains")
    check.add_argument("domains", nargs="+", metavar="DOMAIN")
    check.add_argument(
        "--concurrency",
        type=int,
        help="Max concurrent registrar lookups (default from settings)",
    )

    idea = sub.add_parser("suggest", help="Suggest and check domains for a project idea")
    idea.add_argument("idea", help='Project description (e.g. "a marketplace for pet sitters")')
    idea.add_argument("--keyword", action="append", dest="keywords", metavar="WORD",
                      help="Use this keyword instead of extracting them (repeatable)")
    idea.add_argument("--tld", nargs="+", metavar="TLD", help="TLDs to use")
    idea.add_argument("--vibe", help="The feel of the project (e.g. fun, minimal)")

    for p in (check, idea):
        p.add_argument("--mock", action="store_true", help="Use simulated results, no registrar")
        p.add_argument(
            "--output",
            metavar="FILE",
            help="Export results to a file (supports .json, .jsonl, and .csv)",
        )
    return parser


def _run_generate(args: argparse.Namespace, library: WordLibrary) -> int:
    max_results = (
        args.max_results if args.max_results is not None else int(settings.generator.max_results)
    )
    candidates = generate_candidates(
        args.keywords, vibe=args.vibe, tlds=args.tld, max_results=max_results, library=library
    )
    if not candidates:
        console.print("No usable keywords.")
        return 1
    for candidate in candidates:
        console.print(candidate)
    return 0


def _run_check(args: argparse.Namespace, policy: DispatchPolicy) -> list[DomainCheckResult]:
    domains = args.domains
    malformed = [d for d in domains if not is_well_formed(d.lower())]
    if malformed:
        console.print(
            f"[yellow]Warning: these don't look like domain names: {', '.join(malformed)}[/yellow]"
        )
    if args.concurrency:
        policy = dataclasses.replace(policy, max_concurrent_requests=args.concurrency)

    with _create_progress("Checking domains", output_console=console) as progress:
        task = progress.add_task("check", total=len(domains))

        def on_result(result: DomainCheckResult) -> None:
            progress.advance(task)

        return asyncio.run(check_availability(domains, policy=policy, on_result=on_result))


def _run_suggest(
    args: argparse.Namespace, policy: DispatchPolicy, library: WordLibrary
) -> list[DomainCheckResult]:
    with _create_progress("Checking suggestions", output_console=console) as progress:
        # total is unknown until the candidates are generated
        task = progress.add_task("suggest", total=None)

        def on_result(result: DomainCheckResult) -> None:
            progress.advance(task)

        suggestion = asyncio.run(
            suggest_domains(
                args.idea,
                keywords=args.keywords,
                tlds=args.tld,
                vibe=args.vibe,
                policy=policy,
                library=library,
                on_result=on_result,
            )
        )
        progress.update(task, total=len(suggestion.results))
    if suggestion.keywords:
        console.print(f"Keywords: {', '.join(suggestion.keywords)}")
    console.print(suggestion.summary())
    return suggestion.results


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        settings.validators.validate()
    except ValidationError as e:
        console.print(f"[red]Error: invalid configuration: {e}[/red]")
        return 2

    configure_logging("DEBUG" if args.verbose else None)
    policy = DispatchPolicy.from_settings()
    library = WordLibrary.from_settings()

    if args.command == "generate":
        return _run_generate(args, library)

    if args.mock:
        settings.set("registrar", "mock")

    if args.command == "check":
        results = _run_check(args, policy)
    else:
        results = _run_suggest(args, policy, library)

    if not results:
        console.print("No domains to check.")
        return 1

    display_results(results)

    if args.output:
        export_results(results, args.output)
        console.print(f"Results exported to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
