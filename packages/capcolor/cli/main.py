"""Command-line interface for capcolor.

Examples::

    capcolor assign --corpus data/gmk_keycaps.json --color CR --color "#E5A100"
    capcolor assign --corpus data/gmk_keycaps.json --color N9 --color WS1 \\
        --base-keycap "GMK Olivia" --base-layout Base --json
    capcolor patterns --corpus data/gmk_keycaps.json
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from capcolor.core.config.loader import configure_logging, load_app_config
from capcolor.core.config.models import AppConfig
from capcolor.core.corpus.loader import load_corpus
from capcolor.core.errors import InvalidInputError
from capcolor.core.generator import ColorGroupGenerator
from capcolor.core.models.corpus import Keycap
from capcolor.core.models.request import GenerationRequest, GenerationResult
from capcolor.core.palette.catalog import ColorTable
from capcolor.core.palette.color_math import hex_to_rgb
from capcolor.core.profiling.analyzer import PatternAnalyzer

console = Console()
logger = logging.getLogger(__name__)


def _resolve_corpus_path(cli_value: str | None, config: AppConfig) -> Path:
    """Corpus path from the command line, else from config."""
    return Path(cli_value) if cli_value else Path(config.corpus_path)


def _load_corpus_or_report(path: Path) -> list[Keycap] | None:
    try:
        return load_corpus(path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: Could not load corpus: {escape(str(e))}[/red]")
        return None


def _render_result(result: GenerationResult, table: ColorTable) -> None:
    title = f"Color groups ({result.strategy.value})"
    if result.reference:
        title += f" - {escape(result.reference)}"

    out = Table(title=title)
    out.add_column("Group", style="bold")
    out.add_column("Body")
    out.add_column("Legend")

    for group in result.assignment.groups:
        body_hex = table.describe(group.approx)
        legend_hex = table.describe(group.legend)
        out.add_row(
            group.group_id,
            _swatch(group.approx.value, body_hex),
            _swatch(group.legend.value, legend_hex),
        )

    console.print(out)
    console.print(f"[dim]cache key: {result.cache_key}[/dim]")


def _swatch(value: str, hex_value: str) -> str:
    if not hex_value.startswith("#") or hex_to_rgb(hex_value) is None:
        return escape(value)
    label = escape(value if value == hex_value else f"{value} ({hex_value})")
    return f"[on {hex_value}]   [/] {label}"


def cmd_assign(args: argparse.Namespace, config: AppConfig) -> int:
    corpus = _load_corpus_or_report(_resolve_corpus_path(args.corpus, config))
    if corpus is None:
        return 1

    request = GenerationRequest(
        colors=args.color or (),
        base_layout_keycap_id=args.base_keycap,
        base_layout_name=args.base_layout,
        use_base_image_colors=not args.ignore_base,
    )

    generator = ColorGroupGenerator(config.engine)
    try:
        result = generator.generate(request, corpus)
    except InvalidInputError as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1

    if args.json:
        payload = {
            "strategy": result.strategy.value,
            "reference": result.reference,
            "cacheKey": result.cache_key,
            "colorGroups": result.assignment.to_color_groups(),
        }
        print(json.dumps(payload, indent=2))
    else:
        _render_result(result, ColorTable.from_corpus(corpus))
    return 0


def cmd_patterns(args: argparse.Namespace, config: AppConfig) -> int:
    corpus = _load_corpus_or_report(_resolve_corpus_path(args.corpus, config))
    if corpus is None:
        return 1

    distributions = PatternAnalyzer(config.engine.top_colors_limit).analyze(corpus)
    if not distributions:
        console.print("[yellow]No color groups found in corpus[/yellow]")
        return 0

    out = Table(title=f"Group color patterns ({len(corpus)} keycap sets)")
    out.add_column("Group", style="bold")
    out.add_column("Top colors")
    out.add_column("Dominant", justify="right")
    out.add_column("Samples", justify="right")
    for group_id, distribution in distributions.items():
        out.add_row(
            group_id,
            ", ".join(distribution.top_colors),
            f"{distribution.dominant_ratio:.0%}",
            str(distribution.total),
        )
    console.print(out)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="capcolor",
        description="Assign keycap group colors from a reference corpus",
    )
    parser.add_argument("--config", type=Path, default=None, help="App config (.json/.yaml)")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override logging level",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    assign = sub.add_parser("assign", help="Assign requested colors to keycap groups")
    assign.add_argument("--corpus", default=None, help="Corpus JSON (default from config)")
    assign.add_argument(
        "--color",
        action="append",
        help="Requested color: GMK code (CR) or hex (#RRGGBB). Repeatable.",
    )
    assign.add_argument("--base-keycap", default=None, help="Reference keycap set name")
    assign.add_argument("--base-layout", default=None, help="Reference layout name")
    assign.add_argument(
        "--ignore-base", action="store_true", help="Ignore the reference layout"
    )
    assign.add_argument("--json", action="store_true", help="Print colorGroups JSON")
    assign.set_defaults(func=cmd_assign)

    patterns = sub.add_parser("patterns", help="Show learned per-group color patterns")
    patterns.add_argument("--corpus", default=None, help="Corpus JSON (default from config)")
    patterns.set_defaults(func=cmd_patterns)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        config = load_app_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: Could not load config: {escape(str(e))}[/red]")
        return 1

    # Keep stdout clean for --json unless a level was asked for explicitly
    level = args.log_level or ("ERROR" if getattr(args, "json", False) else None)
    if level:
        config = config.model_copy(
            update={"logging": config.logging.model_copy(update={"level": level})}
        )
    configure_logging(config)
    logger.debug("Running %s with corpus %s", args.command, config.corpus_path)

    return int(args.func(args, config))


if __name__ == "__main__":
    sys.exit(main())
