"""Command line interface for fsf.

Usage:
    fsf serve [--host HOST] [--port PORT] [--static-dir DIR] [--manifest FILE]
              [--title TITLE] [--debug]
    fsf test <path>

Options not given on the command line fall back to ``FSF_*`` environment
variables, then to ServerConfig defaults.
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from pathlib import Path

from fsf import __version__
from fsf.config import ServerConfig
from fsf.errors import FsfError
from fsf.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="fsf", description="Serve builder-rendered pages.")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = p.add_subparsers(dest="command", required=True)

    serve_p = sub.add_parser("serve", help="Start the HTTP server")
    serve_p.add_argument("--host")
    serve_p.add_argument("--port", type=int)
    serve_p.add_argument("--static-dir", type=Path, dest="static_dir")
    serve_p.add_argument("--manifest", type=Path, dest="manifest_path")
    serve_p.add_argument("--title")
    serve_p.add_argument("--debug", action="store_true", default=None)

    test_p = sub.add_parser("test", help="Run test_* functions under a path")
    test_p.add_argument("path", type=Path)
    test_p.add_argument("--debug", action="store_true", default=None)

    return p


def config_from_args(args: argparse.Namespace, base: ServerConfig | None = None) -> ServerConfig:
    """Overlay explicitly given command line options on a base config."""
    base = base if base is not None else ServerConfig.from_env()
    names = {f.name for f in dataclasses.fields(ServerConfig)}
    overrides = {k: v for k, v in vars(args).items() if k in names and v is not None}
    return dataclasses.replace(base, **overrides)


def _cmd_serve(args: argparse.Namespace) -> int:
    from fsf.app import serve

    config = config_from_args(args)
    configure_logging(config.debug)
    serve(config)
    return 0


def _cmd_test(args: argparse.Namespace) -> int:
    from fsf.harness import run_directory

    configure_logging(bool(args.debug))
    if not args.path.exists():
        print(f"error: {args.path} does not exist", file=sys.stderr)
        return 2
    return run_directory(args.path)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    handlers = {"serve": _cmd_serve, "test": _cmd_test}
    try:
        return handlers[args.command](args)
    except FsfError as e:
        logger.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
