#!/usr/bin/env python3
"""
CLI wrapper for building a family cookbook.

Usage:
    python -m cookbook_builder.cli --records exports/records.json --select-all
    python -m cookbook_builder.cli --records records.json --recipe r1 --recipe r7 --family-name Smith
    python -m cookbook_builder.cli --records records.yml --legacy l2 --output-dir out/ --config my_layout.yml
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .errors import EmptySelectionError, GenerationError
from .logging_utils import get_logger, setup_logging
from .models import CookbookConfig
from .pipelines import build_cookbook

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_EMPTY_SELECTION = 2


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Build a printable family cookbook PDF")
    p.add_argument("--records", dest="records_path", type=Path, help="Exported record file (JSON or YAML)")
    p.add_argument("--recipe", dest="recipe_ids", action="append", default=[], metavar="ID")
    p.add_argument("--legacy", dest="legacy_ids", action="append", default=[], metavar="ID")
    p.add_argument("--select-all", action="store_true", help="Include every recipe and legacy recipe")
    p.add_argument("--family-name", dest="family_name")
    p.add_argument("--output-dir", dest="output_dir", type=Path)
    p.add_argument("--config", dest="layout_config_path", type=Path, help="Layout overrides YAML")
    p.add_argument("--log-file", dest="log_file")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(verbose=args.verbose, log_file=args.log_file)

    cfg = CookbookConfig.default()
    if args.records_path:
        cfg.records_path = args.records_path
    if args.output_dir:
        cfg.output_dir = args.output_dir
    if args.layout_config_path:
        cfg.layout_config_path = args.layout_config_path
    cfg.family_name = args.family_name
    cfg.recipe_ids = list(args.recipe_ids)
    cfg.legacy_ids = list(args.legacy_ids)
    cfg.select_all = args.select_all

    try:
        path = build_cookbook(cfg)
    except EmptySelectionError as e:
        logger.error("%s", e)
        return EXIT_EMPTY_SELECTION
    except GenerationError as e:
        logger.error("Failed to generate cookbook: %s", e)
        return EXIT_FAILED

    print(f"\nCookbook written to: {path}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
