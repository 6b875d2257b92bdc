"""CLI entrypoints for helpgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, HelpGenConfig, load_config
from .formatters import FORMATTERS
from .generator import HelpGenerator
from .logging import configure_logging
from .models import UnresolvableCommandError


def _add_logging_options(
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
    log_file_kwargs: dict[str, object] = {
        "metavar": "PATH",
        "help": "Also write log records to this file.",
    }
    log_file_kwargs["default"] = argparse.SUPPRESS if suppress_default else None
    parser.add_argument("--log-file", **log_file_kwargs)


def _add_source_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-r",
        "--root",
        help="Packages root directory (overrides packages_root in .helpgen.yml).",
    )
    parser.add_argument(
        "--syntax",
        choices=sorted(FORMATTERS),
        help="Parameter syntax style for generated help (default: unix).",
    )
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .helpgen.yml or the directory containing it.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="helpgen",
        description="Generate command help files from cmdlet packages.",
    )
    _add_logging_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Write a help file for every installed command.",
    )
    _add_logging_options(generate_parser, suppress_default=True)
    _add_source_options(generate_parser)
    generate_parser.add_argument(
        "-o",
        "--out",
        help="Output directory (defaults to ./help).",
    )

    show_parser = subparsers.add_parser(
        "show",
        help="Print help for a single command.",
    )
    _add_logging_options(show_parser, suppress_default=True)
    _add_source_options(show_parser)
    show_parser.add_argument(
        "keys",
        nargs="+",
        help="Command key path, e.g. `vm start`.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Serve help generation over HTTP.",
    )
    _add_logging_options(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def _effective_config(args: argparse.Namespace) -> HelpGenConfig:
    config = load_config(Path(args.config))
    if args.root:
        config.packages_root = Path(args.root).expanduser().resolve()
    if getattr(args, "out", None):
        config.output_dir = Path(args.out).expanduser().resolve()
    if args.syntax:
        config.syntax = args.syntax
    return config


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for helpgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)

    if args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port)
        return

    try:
        config = _effective_config(args)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if config.packages_root is None:
        parser.exit(1, "No packages root given. Pass --root or set packages_root in .helpgen.yml.\n")

    generator = HelpGenerator.from_config(config)

    if args.command == "generate":
        try:
            report = generator.run(config.packages_root, config.resolved_output_dir())
        except FileNotFoundError as exc:
            parser.exit(1, f"{exc}\n")
        except (RuntimeError, UnresolvableCommandError) as exc:
            parser.exit(1, f"helpgen generate failed: {exc}\nRun with --verbose for more details.\n")
        print(f"Wrote {len(report.written)} help file(s), skipped {len(report.skipped)}")
    elif args.command == "show":
        keys = config.key_separator.join(args.keys)
        try:
            lines = generator.generate_for_keys(config.packages_root, keys)
        except FileNotFoundError as exc:
            parser.exit(1, f"{exc}\n")
        except UnresolvableCommandError as exc:
            parser.exit(1, f"{exc}\n")
        except RuntimeError as exc:
            parser.exit(1, f"helpgen show failed: {exc}\nRun with --verbose for more details.\n")
        print("\n".join(lines))
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
