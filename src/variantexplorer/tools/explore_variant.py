#!/usr/bin/env python3
"""Command-line front end for variant exploration.

Resolves a variant query to genomic coordinates and fetches the annotation
layers for that location.

Usage:
    variantexplorer rs56116432
    variantexplorer "BRCA1 c.68_69delAG" --format table
    variantexplorer NC_000017.11:g.43124027_43124028del --compact
    variantexplorer "the BRCA1 185delAG founder mutation" --llm

Output formats:
    --format json    JSON output (default)
    --format table   Human-readable summary
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from variantexplorer.config import load_settings
from variantexplorer.engine import VariantExplorer
from variantexplorer.models.result import ExplorationFailure, ExplorationResult
from variantexplorer.utils.logging_config import setup_logging


def format_json(result: ExplorationResult | ExplorationFailure, pretty: bool = True) -> str:
    return json.dumps(result.model_dump(mode="json"), indent=2 if pretty else None)


def format_table(result: ExplorationResult | ExplorationFailure, console: Console) -> None:
    if isinstance(result, ExplorationFailure):
        console.print(f"[bold red]{result.error.value}[/bold red]: {result.details}")
        for reason in result.reasons:
            console.print(f"  [dim]{reason}[/dim]")
        return

    coords = result.coordinates
    table = Table(title=f"{result.query} ({result.parsed.kind})")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("Location", f"{coords.chromosome}:{coords.start}-{coords.end} ({coords.strand.value})")
    table.add_row("Assembly", coords.assembly)
    table.add_row("Allele", coords.allele or "-")
    table.add_row("Provenance", coords.provenance + (" [yellow](approximate)[/yellow]" if coords.approximate else ""))
    if coords.transcript:
        table.add_row("Transcript", coords.transcript)

    bundle = result.annotations
    table.add_row("Window", f"{bundle.chromosome}:{bundle.start}-{bundle.end} ({bundle.genome})")
    for layer, outcome in bundle.layers.items():
        status = "[green]present[/green]" if outcome.is_present else f"[red]absent[/red] {outcome.note or ''}"
        table.add_row(layer.value, status)
    if bundle.browser_url:
        table.add_row("Browser", bundle.browser_url)

    console.print(table)


async def run(query: str, args: argparse.Namespace) -> ExplorationResult | ExplorationFailure:
    overrides = {}
    if args.max_attempts is not None:
        overrides["max_attempts"] = args.max_attempts
    if args.llm:
        overrides["enable_llm_extraction"] = True

    settings = load_settings(args.config, **overrides)
    async with VariantExplorer(settings=settings) as explorer:
        return await explorer.explore_variant(query)


def main():
    parser = argparse.ArgumentParser(
        description="Resolve a variant to genomic coordinates and aggregate annotations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s rs56116432                                  # rsID
  %(prog)s "BRCA1 c.68_69delAG"                        # Gene + coding change
  %(prog)s NM_007294.4:c.68_69del --format table       # Transcript HGVS
  %(prog)s NC_000017.11:g.43124027_43124028del         # Genomic HGVS
"""
    )

    parser.add_argument('query', help='Variant query (HGVS, gene + c. change, or rsID)')
    parser.add_argument(
        '--format', '-f',
        choices=['json', 'table'],
        default='json',
        help='Output format (default: json)'
    )
    parser.add_argument('--compact', '-c', action='store_true', help='Compact JSON output')
    parser.add_argument('--config', type=Path, help='YAML settings file')
    parser.add_argument('--max-attempts', type=int, help='Retries per remote call (default: 2)')
    parser.add_argument('--llm', action='store_true', help='Use an LLM to extract HGVS from free text')
    parser.add_argument('--log-level', default='WARNING', help='Log level (default: WARNING)')

    args = parser.parse_args()

    setup_logging(level=args.log_level)
    result = asyncio.run(run(args.query, args))

    if args.format == 'json':
        print(format_json(result, pretty=not args.compact))
    else:
        format_table(result, Console())

    if isinstance(result, ExplorationFailure):
        sys.exit(1)


if __name__ == '__main__':
    main()
