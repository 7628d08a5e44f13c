# SPDX-License-Identifier: MIT
"""
Robber - Command Line Interface

This CLI provides:
- robber version
- robber colors [--config <path>]
- robber show <findings.json> [--config <path>]
"""

import argparse
import logging
import sys

from . import __version__
from .config import build_report_settings, load_report_config
from .core.exceptions import ExportError, RobberConfigError
from .core.levels import Level
from .core.logger import Logger
from .export.json_export import load_findings


def main(argv=None):
    argv = argv if argv is not None else sys.argv[1:]
    p = argparse.ArgumentParser(prog="robber", description="Robber secret report tools")
    p.add_argument("-v", "--version", action="store_true", help="print version and exit")

    sub = p.add_subparsers(dest="cmd")
    sub.add_parser("version", help="print version")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", help="path to report config YAML file")
    common.add_argument("--verbose", action="store_true", help="enable verbose output")

    sub.add_parser("colors", parents=[common], help="show the resolved color for each level")

    sp = sub.add_parser("show", parents=[common], help="print a saved findings file")
    sp.add_argument("findings", help="path to a findings JSON file")
    sp.add_argument(
        "--no-context",
        dest="no_context",
        action="store_true",
        help="print only the secret, without commit details"
    )

    args = p.parse_args(argv)

    if args.version or args.cmd == "version":
        print(__version__)
        return 0

    if args.cmd in ("colors", "show"):
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )
        try:
            config = load_report_config(args.config)
        except RobberConfigError as e:
            print(f"CONFIG ERROR: {e}", file=sys.stderr)
            return 1

        settings = build_report_settings(config)
        if args.verbose:
            settings.verbose = True
        logger = Logger.from_settings(settings)

        if args.cmd == "colors":
            return handle_colors_command(logger)
        if args.no_context:
            settings.no_context = True
        return handle_show_command(args.findings, logger, settings)

    p.print_help()
    return 0


def handle_colors_command(logger):
    """Print every level name in its resolved style."""
    for level in Level:
        if level is Level.VERBOSE and not logger.verbose:
            logger.log_info("verbose output disabled, pass --verbose to preview it")
            continue
        logger.log(level, "%s", level.value)
    return 0


def handle_show_command(path, logger, settings):
    """Handle the show subcommand."""
    try:
        findings = load_findings(path)
    except ExportError as e:
        logger.log_fail("%s", e)

    logger.log_verbose("Loaded %d findings from %s", len(findings), path)
    if not findings:
        logger.log_succ("No findings in %s", path)
        return 0

    for finding in findings:
        logger.log_persisted(finding, no_context=settings.no_context)

    logger.log_warn("%d findings in %s", len(findings), path)
    return 0
