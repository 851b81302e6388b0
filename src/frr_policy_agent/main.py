"""Entry point compiling a routing specification into FRR configuration."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from frr_policy import CompilationError, api_to_config

from .config import load_specification

LOG = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compile a routing specification into resolved FRR configuration"
    )
    parser.add_argument(
        "--spec",
        type=Path,
        required=True,
        help="Path to the YAML routing specification",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the resolved configuration here instead of stdout",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        spec = load_specification(args.spec)
    except (KeyError, OSError, ValueError, yaml.YAMLError) as exc:
        LOG.error("failed to load specification %s: %s", args.spec, exc)
        return 1

    try:
        config = api_to_config(spec)
    except CompilationError as exc:
        LOG.error("failed to compile %s: %s", args.spec, exc)
        return 1

    body = json.dumps(config.to_dict(), indent=2) + "\n"
    if args.output is None:
        sys.stdout.write(body)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(body)
        LOG.info("Resolved configuration written to %s", args.output)

    LOG.debug("compiled %d routers", len(config.routers))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
