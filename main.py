"""
CLI entrypoint for the taxonomy style-guide wizard.

This script performs the following steps:
- loads .env and configs/settings.yaml (both optional)
- loads the taxonomy catalog and builds the tree index once
- runs one command against the session:
  browse       list the options under a path and what is still missing
  match        fuzzy-match a product name against product types
  guide        print or export the style guide for a complete path
  validate     check a product listing against a path
  batch-match  match every row of a CSV/XLSX file
"""

import argparse
import logging
import os
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from application import (
    ProductData,
    TaxonomySession,
    build_style_guide,
    match_table,
    render_style_guide,
    structured_data,
    suggest_attributes,
    validate_product,
    write_export,
)
from application.constants import BATCH_OUTPUT_FILENAME, EXPORT_FORMATS
from domain.taxonomy import LEVELS
from infrastructure.config import AppConfig, load_app_config
from infrastructure.constants import SETTINGS_FILE
from infrastructure.io import SourceUnavailable, ensure_exists, load_taxonomy, read_table, write_table
from infrastructure.observability import configure_logging, make_session_tag, set_log_context

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Product taxonomy style-guide wizard")
    p.add_argument(
        "--settings",
        type=str,
        default=None,
        help=f"Path to settings YAML (default: {SETTINGS_FILE} if present)",
    )
    p.add_argument("--env", type=str, default=".env", help="Path to .env file (default: .env, optional)")
    p.add_argument("--taxonomy", type=str, default=None, help="Override the taxonomy catalog path")
    p.add_argument("--log-file", type=str, default=None, help="Also write logs to this file")
    p.add_argument("--console-level", type=str, default="INFO", choices=LOG_LEVELS, help="Console log level")
    p.add_argument("--file-level", type=str, default="DEBUG", choices=LOG_LEVELS, help="File log level")

    sub = p.add_subparsers(dest="command", required=True)

    browse = sub.add_parser("browse", help="List options under a taxonomy path")
    browse.add_argument("--path", type=str, default="", help="' > '-separated path (default: root)")

    match = sub.add_parser("match", help="Find product types similar to a product name")
    match.add_argument("query", type=str)

    guide = sub.add_parser("guide", help="Generate the style guide for a complete path")
    guide.add_argument("--path", type=str, default=None, help="' > '-separated path")
    guide.add_argument("--match", type=str, default=None, help="Use the best match for this product name instead")
    guide.add_argument("--format", type=str, default="text", choices=["text", *EXPORT_FORMATS])

    validate = sub.add_parser("validate", help="Validate a product listing against a path")
    validate.add_argument("--path", type=str, required=True)
    for field in ProductData.model_fields:
        validate.add_argument(f"--{field}", type=str, default="")

    batch = sub.add_parser("batch-match", help="Match every row of a CSV/XLSX file")
    batch.add_argument("--input", type=str, required=True)
    batch.add_argument("--column", type=str, required=True, help="Column holding product names")
    batch.add_argument("--output", type=str, default=None, help=f"Output CSV (default: <output_dir>/{BATCH_OUTPUT_FILENAME})")

    return p.parse_args(argv)


def _load_config(args: argparse.Namespace) -> AppConfig:
    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    if args.settings is not None:
        settings_path: Path | None = Path(args.settings)
        ensure_exists(settings_path, "settings.yaml")
    else:
        settings_path = SETTINGS_FILE if SETTINGS_FILE.exists() else None

    cfg = load_app_config(settings_path)
    if args.taxonomy:
        cfg.taxonomy_file = Path(args.taxonomy)
    return cfg


def _cmd_browse(session: TaxonomySession, args: argparse.Namespace) -> None:
    session.choose_path(args.path)
    print(f"Selection: {session.breadcrumb}")

    next_level = next((level for level in LEVELS if not session.selection.get(level)), None)
    if next_level is None or not session.available_levels.is_available(next_level):
        print("No further levels.")
    else:
        options = session.options(next_level)
        print(f"{next_level.label} options ({len(options)}):")
        for name, count in options:
            print(f"  {name}" + (f"  ({count})" if count else ""))

    if session.is_complete:
        print("Selection complete.")
    else:
        print(f"Please select: {', '.join(session.missing_levels)}")


def _cmd_match(session: TaxonomySession, args: argparse.Namespace) -> None:
    matches = session.find_matches(args.query)
    if not matches:
        print("No similar products found. Try a different search term.")
        return
    print("Similar Products Found:")
    for m in matches:
        print(f"  {m.score:3d}%  {m.item.full_path}")


def _cmd_guide(session: TaxonomySession, cfg: AppConfig, args: argparse.Namespace) -> None:
    if args.match:
        matches = session.find_matches(args.match)
        if not matches:
            raise ValueError(f"No taxonomy match for {args.match!r}")
        session.select_match(matches[0].item.full_path)
    elif args.path:
        session.choose_path(args.path)
    else:
        raise ValueError("guide requires --path or --match")

    guide = build_style_guide(session, fallback_version=cfg.fallback_taxonomy_version)
    if args.format == "text":
        print(render_style_guide(guide))
        return

    data = structured_data(session.selection, version=guide.taxonomy_version)
    path = write_export(data, args.format, cfg.output_dir)
    print(path)


def _cmd_validate(session: TaxonomySession, cfg: AppConfig, args: argparse.Namespace) -> None:
    session.choose_path(args.path)
    product = ProductData(**{field: getattr(args, field) for field in ProductData.model_fields})

    print("Validation Results:")
    for result in validate_product(session.selection, product, cfg.validation):
        print(f"  [{result.type}] {result.message}")

    suggestions = suggest_attributes(session.selection, product)
    if suggestions:
        print("Auto-Suggestions:")
        for name, values in suggestions.items():
            print(f"  {name.capitalize()}: {', '.join(values)}")


def _cmd_batch_match(session: TaxonomySession, cfg: AppConfig, args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    logger.info("Loading product names from %s...", input_path)
    df = read_table(input_path)
    logger.info("Input loaded: %d rows, %d columns", df.shape[0], df.shape[1])

    out_df = match_table(session, df, args.column)
    out_path = Path(args.output) if args.output else cfg.output_dir / BATCH_OUTPUT_FILENAME
    write_table(out_df, out_path)
    logger.info("Saved batch matches to %s", out_path)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    configure_logging(
        log_file=Path(args.log_file) if args.log_file else None,
        console_level=getattr(logging, args.console_level),
        file_level=getattr(logging, args.file_level),
    )
    session_id = f"{datetime.now():%Y%m%d_%H%M%S}_{os.getpid()}"
    set_log_context(session_id_full=session_id, command=args.command)
    logger.debug("Starting session %s (tag=%s)", session_id, make_session_tag(session_id))

    try:
        cfg = _load_config(args)
        parsed = load_taxonomy(cfg.taxonomy_file)
    except SourceUnavailable as e:
        logger.error("%s", e)
        logger.error("Taxonomy data is unavailable; nothing else can run. Fix the path and retry.")
        return 1
    except (FileNotFoundError, ValueError) as e:
        logger.error("Configuration error: %s", e)
        return 1

    session = TaxonomySession.from_parsed(parsed, cfg.match)

    try:
        if args.command == "browse":
            _cmd_browse(session, args)
        elif args.command == "match":
            _cmd_match(session, args)
        elif args.command == "guide":
            _cmd_guide(session, cfg, args)
        elif args.command == "validate":
            _cmd_validate(session, cfg, args)
        elif args.command == "batch-match":
            _cmd_batch_match(session, cfg, args)
    except (KeyError, ValueError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
