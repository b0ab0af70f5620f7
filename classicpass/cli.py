"""CLI for ClassicPass — generate passwords and rate their strength."""

import argparse
import logging
import sys
from rich import print
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import load_config, default_options, length_bounds
from .controls import clamp_length
from .generator import generate_from
from .log import setup_logging
from .score import score_password, STRONG, MEDIUM, MIN_MEDIUM_LENGTH, MIN_STRONG_LENGTH

logger = logging.getLogger(__name__)

_LABEL_COLORS = {STRONG: "green", MEDIUM: "yellow"}


def _colored(label: str) -> str:
    color = _LABEL_COLORS.get(label, "red")
    return f"[bold {color}]{label}[/bold {color}]"


def cmd_generate(args, cfg):
    if args.copies < 1:
        print("[red]--copies must be at least 1.[/red]")
        return 2

    opts = default_options(cfg)
    opts = opts._replace(
        include_letters=opts.include_letters and not args.no_letters,
        include_numbers=opts.include_numbers and not args.no_numbers,
        include_symbols=opts.include_symbols and not args.no_symbols,
    )
    if not (opts.include_letters or opts.include_numbers or opts.include_symbols):
        print("[red]At least one character type must stay enabled.[/red]")
        return 2

    if args.length is not None:
        lo, hi = length_bounds(cfg)
        clamped = clamp_length(args.length, lo, hi)
        if clamped != args.length:
            print(f"[yellow]Length {args.length} adjusted to {clamped} ({lo}-{hi}).[/yellow]")
        opts = opts._replace(length=clamped)

    for i in range(args.copies):
        pw = generate_from(opts)
        result = score_password(pw)
        print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}  {_colored(result['label'])}")
    return 0


def cmd_score(args, cfg):
    result = score_password(args.password)
    header = f"Strength: {result['label']} — variety {result['score']} / 3"
    body = f"Length: {result['length']} characters"
    print(Panel(body, title=header))

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Criterion")
    table.add_column("Met")
    checks = [
        ("At least 8 characters", result["length"] >= MIN_MEDIUM_LENGTH),
        ("At least 12 characters", result["length"] >= MIN_STRONG_LENGTH),
        ("Upper and lower case letters", result["checks"]["mixed_case"]),
        ("A digit (0-9)", result["checks"]["digit"]),
        ("A symbol", result["checks"]["symbol"]),
    ]
    for name, ok in checks:
        table.add_row(name, "[green]yes[/green]" if ok else "[red]no[/red]")
    print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="classicpass")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, default=None, help="Password length (clamped to the configured bounds)")
    gen.add_argument("--no-letters", action="store_true", help="Disable letters")
    gen.add_argument("--no-numbers", action="store_true", help="Disable numbers")
    gen.add_argument("--no-symbols", action="store_true", help="Disable symbols")
    gen.add_argument("--copies", type=int, default=1, help="How many passwords to generate")
    gen.set_defaults(func=cmd_generate)

    sc = sub.add_parser("score", help="Rate a password as Weak, Medium or Strong")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    sc.set_defaults(func=cmd_score)
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = load_config()
    setup_logging("INFO" if args.verbose else cfg.get("log_level", "WARNING"))
    logger.info("running %s", args.cmd)
    try:
        return args.func(args, cfg)
    except ValueError as e:
        print(f"[red]{e}[/red]")
        return 2


if __name__ == "__main__":
    sys.exit(main())
