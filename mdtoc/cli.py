"""CLI entrypoints for mdtoc commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import OMIT_MATCH_POLICIES, ConfigError, TocOptions, load_config
from .files import add_toc
from .frontmatter import FrontMatterError
from .generator import raw
from .logging import configure_logging
from .markers import insert


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_log_file_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "--log-file",
        type=Path,
        default=argparse.SUPPRESS if suppress_default else None,
        help="Also append log records to this file.",
    )


def _add_toc_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        help="Markdown file to read.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .mdtoc.yml file or its directory (defaults to the current directory).",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Deepest heading level to include after rebasing.",
    )
    parser.add_argument(
        "--firsth1",
        action="store_true",
        default=None,
        help="Include the document's first heading instead of treating it as the title.",
    )
    parser.add_argument(
        "--omit",
        action="append",
        default=None,
        help="Heading text to leave out of the TOC (repeatable).",
    )
    parser.add_argument(
        "--omit-match",
        choices=OMIT_MATCH_POLICIES,
        default=None,
        help="How --omit entries are compared with heading text.",
    )
    parser.add_argument(
        "--bullet",
        action="append",
        default=None,
        help="Bullet string; repeat to cycle bullets by depth.",
    )
    parser.add_argument(
        "--template",
        default=None,
        help="Jinja2 template for one TOC line (fields: depth, bullet, heading, url).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdtoc",
        description="Generate and insert tables of contents for Markdown documents.",
    )
    _add_verbose_option(parser)
    _add_log_file_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Print the table of contents for a Markdown file.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    _add_log_file_option(generate_parser, suppress_default=True)
    _add_toc_options(generate_parser)
    generate_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the TOC entries as JSON instead of Markdown.",
    )

    insert_parser = subparsers.add_parser(
        "insert",
        help="Insert or refresh the TOC between <!-- toc --> and <!-- tocstop --> markers.",
    )
    _add_verbose_option(insert_parser, suppress_default=True)
    _add_log_file_option(insert_parser, suppress_default=True)
    _add_toc_options(insert_parser)
    insert_parser.add_argument(
        "-o",
        "--dest",
        type=Path,
        default=None,
        help="Write the result here instead of overwriting the source file.",
    )
    insert_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the updated document without writing it.",
    )

    return parser


def _resolve_options(args: argparse.Namespace) -> TocOptions:
    options = load_config(args.config or Path.cwd())
    bullet = tuple(args.bullet) if args.bullet else None
    if bullet is not None and len(bullet) == 1:
        bullet = bullet[0]
    return options.merge(
        max_depth=args.max_depth,
        firsth1=args.firsth1,
        omit=tuple(args.omit) if args.omit else None,
        omit_match=args.omit_match,
        bullet=bullet,
        template=args.template,
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for mdtoc commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        options = _resolve_options(args)
        if args.command == "generate":
            content = Path(args.path).read_text(encoding="utf-8")
            result = raw(content, options)
            if args.json:
                print(json.dumps(result.data, indent=2, ensure_ascii=False))
            else:
                sys.stdout.write(result.toc)
        elif args.command == "insert":
            if args.dry_run:
                content = Path(args.path).read_text(encoding="utf-8")
                sys.stdout.write(insert(content, options))
            else:
                add_toc(args.path, args.dest, options)
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except FileNotFoundError as exc:
        parser.exit(1, f"{exc}\n")
    except (ConfigError, FrontMatterError) as exc:
        parser.exit(1, f"mdtoc: {exc}\n")


if __name__ == "__main__":
    main(sys.argv[1:])
