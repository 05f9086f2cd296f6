# SPDX-License-Identifier: MIT
"""Command-line interface for satbuild."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from satbuild.core.build_context import CompileLinkContext, MsvcCompileLinkContext
from satbuild.core.errors import SatbuildError
from satbuild.core.kinds import BuildConfiguration
from satbuild.core.project_info import ProjectInfo
from satbuild.core.scanner import FilterMode, scan
from satbuild.core.target import TargetContext
from satbuild.targets import PLANS, build_target

# Set up logging
logger = logging.getLogger("satbuild")


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity level."""
    if debug:
        level = logging.DEBUG
        fmt = "%(levelname)s: %(name)s: %(message)s"
    elif verbose:
        level = logging.INFO
        fmt = "%(levelname)s: %(message)s"
    else:
        level = logging.WARNING
        fmt = "%(levelname)s: %(message)s"

    logging.basicConfig(level=level, format=fmt)


def parse_variables(args: list[str]) -> tuple[dict[str, str], list[str]]:
    """Parse KEY=value arguments from a list.

    Args:
        args: List of arguments.

    Returns:
        Tuple of (variables dict, remaining args).
    """
    variables: dict[str, str] = {}
    remaining: list[str] = []

    for arg in args:
        if "=" in arg and not arg.startswith("-"):
            key, _, value = arg.partition("=")
            if key:  # Valid KEY=value
                variables[key] = value
            else:
                remaining.append(arg)
        else:
            remaining.append(arg)

    return variables, remaining


def export_variables(variables: dict[str, str]) -> None:
    """Make command-line variables visible to satbuild.get_var()."""
    import satbuild

    if variables:
        os.environ["SATBUILD_VARS"] = json.dumps(variables)
        logger.debug("  SATBUILD_VARS=%s", os.environ["SATBUILD_VARS"])
    satbuild._reset_vars()


def cmd_resolve(args: argparse.Namespace) -> int:
    """Initialize a target and print it as JSON.

    With --flags, also prints the formatted compiler/linker tokens.
    """
    setup_logging(args.verbose, args.debug)

    variables, remaining = parse_variables(getattr(args, "extra", []))
    if remaining:
        logger.error("Unexpected arguments: %s", " ".join(remaining))
        return 1
    export_variables(variables)

    import satbuild

    source_dir = Path(args.source_dir).absolute()
    project = ProjectInfo(
        name=args.name or source_dir.name,
        source_dir=source_dir,
        build_dir=Path(args.build_dir).absolute(),
    )

    try:
        if args.config:
            configuration = BuildConfiguration.parse(args.config)
        else:
            configuration = satbuild.get_configuration()
        context = TargetContext.from_environment(project, configuration)
        spec = build_target(context, args.kind)
    except SatbuildError as e:
        logger.error("%s", e)
        return 1

    output = spec.to_dict()
    if args.flags:
        ctx_class = MsvcCompileLinkContext if args.flags == "msvc" else CompileLinkContext
        output["flags"] = ctx_class.from_target(spec).get_variables()

    print(json.dumps(output, indent=2))
    return 0


def cmd_scan(args: argparse.Namespace) -> int:
    """List the files under a directory, one per line."""
    setup_logging(args.verbose, args.debug)

    root = Path(args.root)
    if not root.is_dir():
        logger.error("Not a directory: %s", root)
        return 1

    if args.ext:
        result = scan(root, FilterMode.EXTENSION, args.ext)
    elif args.source_only:
        result = scan(root, FilterMode.SOURCE_DIRECTORIES)
    else:
        result = scan(root)

    for path in result.files:
        print(path)

    if args.strict and result.warnings:
        logger.error("%d path(s) could not be read", len(result.warnings))
        return 1
    return 0


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments to a parser."""
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Debug output")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the satbuild CLI."""
    parser = argparse.ArgumentParser(
        prog="satbuild",
        description="Resolve build inputs for projects using the Saturn engine.",
        epilog="Run 'satbuild <command> --help' for command-specific help.",
    )
    from satbuild import __version__

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # satbuild resolve
    resolve_parser = subparsers.add_parser(
        "resolve", help="Print the include/library paths, links and defines"
    )
    add_common_args(resolve_parser)
    resolve_parser.add_argument("-n", "--name", help="Project name (default: source dir name)")
    resolve_parser.add_argument(
        "-S", "--source-dir", default=".", help="Project source directory (default: .)"
    )
    resolve_parser.add_argument(
        "-B", "--build-dir", default="build", help="Build directory (default: build)"
    )
    resolve_parser.add_argument(
        "-c",
        "--config",
        metavar="NAME",
        help="Build configuration (Debug, Release, Dist)",
    )
    resolve_parser.add_argument(
        "-k",
        "--kind",
        default="game",
        choices=sorted(PLANS),
        help="Target kind (default: game)",
    )
    resolve_parser.add_argument(
        "--flags",
        choices=["gcc", "msvc"],
        help="Also print compiler/linker tokens in this style",
    )
    resolve_parser.add_argument(
        "extra",
        nargs="*",
        help="Build variables (KEY=value), e.g. SATURN_DIR=/path/to/Saturn",
    )
    resolve_parser.set_defaults(func=cmd_resolve)

    # satbuild scan
    scan_parser = subparsers.add_parser("scan", help="List files under a directory")
    add_common_args(scan_parser)
    scan_parser.add_argument("root", help="Directory to scan")
    mode = scan_parser.add_mutually_exclusive_group()
    mode.add_argument("--ext", help="Only direct children with this extension (e.g. .cpp)")
    mode.add_argument(
        "--source-only",
        action="store_true",
        help="Only descend into source directories",
    )
    scan_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any path could not be read",
    )
    scan_parser.set_defaults(func=cmd_scan)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
