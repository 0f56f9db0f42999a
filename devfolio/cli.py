"""Command-line entry point for devfolio.

Usage::

    python -m devfolio render portfolio.json -o index.html
    python -m devfolio render --sample --theme dark
    python -m devfolio export portfolio.json --output ./dist
    python -m devfolio themes
    python -m devfolio prefill https://github.com/pallets/jinja
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

from rich.markup import escape
from rich.table import Table

from devfolio.config import Config
from devfolio.errors import DevfolioError
from devfolio.export import export_archive, render_index
from devfolio.github_client import GitHubClient
from devfolio.models import PortfolioData, theme_for_id
from devfolio.render import SAMPLE_PORTFOLIO_DATA, THEME_REGISTRY
from devfolio.utils import (
    console,
    err_console,
    load_json,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    write_text,
)


def _load_portfolio(args: argparse.Namespace) -> PortfolioData:
    if args.sample:
        data = SAMPLE_PORTFOLIO_DATA
    elif args.portfolio:
        data = PortfolioData.model_validate(load_json(args.portfolio))
    else:
        raise DevfolioError("Pass a portfolio JSON file or --sample")
    if args.theme:
        if args.theme not in THEME_REGISTRY:
            print_warning(f"Unknown theme '{args.theme}'; rendering with the default theme")
        data = data.model_copy(update={"theme": theme_for_id(args.theme)})
    return data


def _cmd_render(args: argparse.Namespace, config: Config) -> int:
    html = render_index(_load_portfolio(args), config=config)
    if args.output:
        write_text(Path(args.output), html)
        print_success(f"Wrote {args.output}")
    else:
        sys.stdout.write(html)
    return 0


def _cmd_export(args: argparse.Namespace, config: Config) -> int:
    data = _load_portfolio(args)
    path = asyncio.run(export_archive(data, args.output, config=config))
    print_summary_table(
        {
            "Portfolio": data.user_info.name,
            "Theme": THEME_REGISTRY.resolve(data.theme.id).name,
            "Projects": str(len(data.projects)),
            "Archive": str(path),
        },
        title="Export",
    )
    print_success(f"Exported {data.user_info.name}'s portfolio to {path}")
    return 0


def _cmd_themes(args: argparse.Namespace, config: Config) -> int:
    table = Table(title="Themes", show_header=True, header_style="bold cyan")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name")
    table.add_column("Template")
    for entry in THEME_REGISTRY.entries():
        default = " (default)" if entry.id == THEME_REGISTRY.default_id else ""
        table.add_row(entry.id, entry.name + default, entry.template)
    console.print(table)
    return 0


def _cmd_prefill(args: argparse.Namespace, config: Config) -> int:
    client = GitHubClient(
        api_url=config.github.api_url,
        timeout=config.github.timeout,
        user_agent=config.github.user_agent,
        token=config.github.token,
    )
    details = asyncio.run(client.fetch_repository(args.repo_url))
    if not details.success:
        print_error(f"Error: {escape(details.error or '')}")
        return 1
    project = details.to_project()
    sys.stdout.write(json.dumps(project.model_dump(by_alias=True), indent=2) + "\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devfolio",
        description="devfolio -- render and export developer portfolios",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  devfolio render portfolio.json -o index.html\n"
            "  devfolio render --sample --theme creative-grid\n"
            "  devfolio export portfolio.json --output ./dist\n"
        ),
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON config file (default: read DEVFOLIO_* environment variables)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("render", "Render a portfolio to HTML"),
        ("export", "Export a portfolio as a zip archive"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("portfolio", nargs="?", help="Portfolio JSON file")
        cmd.add_argument("--sample", action="store_true", help="Use the sample portfolio")
        cmd.add_argument("--theme", default=None, help="Override the theme id")
        cmd.add_argument(
            "--output", "-o",
            default=None,
            help="Output file (render) or directory (export)",
        )

    sub.add_parser("themes", help="List the registered themes")

    prefill = sub.add_parser("prefill", help="Fetch a GitHub repository as a project entry")
    prefill.add_argument("repo_url", help="https://github.com/<owner>/<repo>")

    return parser


_COMMANDS = {
    "render": _cmd_render,
    "export": _cmd_export,
    "themes": _cmd_themes,
    "prefill": _cmd_prefill,
}


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point for ``python -m devfolio``."""
    args = build_parser().parse_args(argv)

    # ValueError covers pydantic ValidationError, JSONDecodeError and bad env values.
    try:
        config = Config.load(Path(args.config)) if args.config else Config.from_env()
        return _COMMANDS[args.command](args, config)
    except (DevfolioError, OSError, ValueError) as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
