# src/main.py — v3
"""CLI entry point — export, merge, cache and fingerprint commands.

Usage:
    fotocore export <session.json> [--format csv|xls|kml|gpx|summary|all] [-o DIR]
    fotocore merge <base.json> <imported.json> [-o OUT.json]
    fotocore cache {stats,clear,lookup} [file]
    fotocore fingerprint <file>...
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import uuid
from pathlib import Path
from typing import TYPE_CHECKING

from fotocore.version import __version__

if TYPE_CHECKING:
    from fotocore.cache.image_cache import ImageCache

logger = logging.getLogger(__name__)

_EXPORT_CHOICES = ["csv", "xls", "kml", "gpx", "summary", "all"]


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return asyncio.run(args.func(args))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="fotocore",
        description=f"fotocore v{__version__} - photo result cache and exports",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- export ---
    p_export = subparsers.add_parser(
        "export", help="Export a saved session to download formats",
    )
    p_export.add_argument("session", type=Path, help="Session snapshot (.json)")
    p_export.add_argument(
        "-f", "--format", dest="formats", action="append", choices=_EXPORT_CHOICES,
        help="Format to produce (repeatable, default: all)",
    )
    p_export.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Output directory (default: EXPORT_DIR setting)",
    )
    p_export.add_argument(
        "--name", default=None,
        help="Base name for geospatial files (default: EXPORT_BASE_NAME setting)",
    )
    p_export.set_defaults(func=_cmd_export)

    # --- merge ---
    p_merge = subparsers.add_parser(
        "merge", help="Merge an imported session into a base session",
    )
    p_merge.add_argument("base", type=Path, help="Existing session snapshot")
    p_merge.add_argument("imported", type=Path, help="Session snapshot to import")
    p_merge.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Output file (default: dated session name in the current directory)",
    )
    p_merge.set_defaults(func=_cmd_merge)

    # --- cache ---
    p_cache = subparsers.add_parser("cache", help="Inspect or clear the image cache")
    p_cache.add_argument("action", choices=["stats", "clear", "lookup"])
    p_cache.add_argument(
        "file", type=Path, nargs="?", default=None,
        help="Image to look up (for 'lookup')",
    )
    p_cache.set_defaults(func=_cmd_cache)

    # --- fingerprint ---
    p_fp = subparsers.add_parser("fingerprint", help="Print content fingerprints")
    p_fp.add_argument("files", type=Path, nargs="+", help="Image files")
    p_fp.set_defaults(func=_cmd_fingerprint)

    return parser


async def _cmd_export(args: argparse.Namespace) -> int:
    """Render a session to the requested formats."""
    from fotocore.config.settings import Settings
    from fotocore.core.errors import SessionFormatError
    from fotocore.export.exporter_factory import create_exporter, default_export_filename
    from fotocore.export.gpx_exporter import GpxExporter
    from fotocore.export.kml_exporter import KmlExporter
    from fotocore.export.summary import summary_report
    from fotocore.logging.context import operation_context, set_session_context
    from fotocore.session.serializer import load_session

    session_path: Path = args.session
    if not session_path.is_file():
        logger.error("File not found: %s", session_path)
        return 1

    try:
        loaded = load_session(session_path.read_bytes())
    except SessionFormatError as e:
        logger.error("Invalid session file %s: %s", session_path, e)
        return 1

    settings = Settings()
    set_session_context(uuid.uuid4().hex[:8], loaded.empresa)
    output_dir: Path = args.output or settings.export_dir
    base_name: str = args.name or settings.export_base_name
    formats = _resolve_formats(args.formats, settings.export_formats_list)

    exported = 0
    for fmt in formats:
        with operation_context(f"export:{fmt}"):
            if fmt == "summary":
                path = output_dir / "relatorio_obraphoto.txt"
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(summary_report(loaded.results), encoding="utf-8")
                print(f"  summary -> {path}")
                exported += 1
                continue

            if fmt == "kml":
                exporter = KmlExporter(document_name=base_name)
            elif fmt == "gpx":
                exporter = GpxExporter(track_name=base_name)
            else:
                exporter = create_exporter(fmt)
            target = output_dir / default_export_filename(exporter, base_name)
            document = await exporter.export(loaded.results, target)
            if document.is_empty:
                print(f"  {fmt:7s} -> nothing to export")
            else:
                print(f"  {fmt:7s} -> {document.path} ({document.count} record(s))")
                exported += 1

    return 0 if exported else 2


async def _cmd_merge(args: argparse.Namespace) -> int:
    """Merge two session snapshots and write the result."""
    from fotocore.core.errors import SessionFormatError
    from fotocore.session.serializer import (
        dump_session,
        load_session,
        merge_results,
        save_session,
        session_filename,
    )

    try:
        base = load_session(args.base.read_bytes())
        imported = load_session(args.imported.read_bytes())
    except FileNotFoundError as e:
        logger.error("File not found: %s", e.filename)
        return 1
    except SessionFormatError as e:
        logger.error("Invalid session file: %s", e)
        return 1

    merged = merge_results(base.results, imported.results)
    session = save_session(merged, base.empresa)
    output: Path = args.output or Path(session_filename())
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dump_session(session), encoding="utf-8")

    print("\nMerge complete:")
    print(f"  Base:      {len(base.results)}")
    print(f"  Imported:  {len(imported.results)}")
    print(f"  Merged:    {len(merged)}")
    print(f"  Output:    {output}")
    return 0


async def _cmd_cache(args: argparse.Namespace) -> int:
    """Show stats, clear, or look up one file in the image cache."""
    from fotocore.cache.cache_factory import create_image_cache
    from fotocore.config.settings import Settings

    settings = Settings()
    if not settings.cache_enabled:
        logger.error("Image cache is disabled (CACHE_ENABLED=false)")
        return 1
    cache = create_image_cache(settings)
    try:
        return await _run_cache_action(args, cache, settings.cache_backend)
    finally:
        cache.close()


async def _run_cache_action(
    args: argparse.Namespace, cache: ImageCache, backend: str,
) -> int:
    from fotocore.cache.fingerprint import fingerprint

    if args.action == "stats":
        stats = cache.stats()
        print(f"\nImage cache ({backend}):")
        print(f"  Entries:  {stats.count}")
        print(f"  Size:     {stats.size_label}")
        return 0

    if args.action == "clear":
        cache.clear()
        print("Image cache cleared")
        return 0

    if args.file is None or not args.file.is_file():
        logger.error("lookup needs an existing image file")
        return 1
    key = await fingerprint(args.file.read_bytes())
    result = cache.lookup(key)
    if result is None:
        print(f"{key}  miss")
        return 2
    print(f"{key}  hit  {result.status}  {result.portico or '-'}  {result.dest or '-'}")
    return 0


async def _cmd_fingerprint(args: argparse.Namespace) -> int:
    """Print the fingerprint of each file, flagging duplicates."""
    from fotocore.cache.fingerprint import fingerprint

    seen: dict[str, Path] = {}
    for path in args.files:
        if not path.is_file():
            logger.warning("Skipping missing file: %s", path)
            continue
        key = await fingerprint(path.read_bytes())
        if key in seen:
            print(f"{key}  {path}  (duplicate of {seen[key]})")
        else:
            seen[key] = path
            print(f"{key}  {path}")
    return 0


def _resolve_formats(
    requested: list[str] | None, configured: list[str] | None = None,
) -> list[str]:
    """Expand 'all', fall back to the configured formats, keep first-seen order."""
    if requested and "all" in requested:
        return ["csv", "xls", "kml", "gpx", "summary"]
    if not requested:
        return [*(configured or ["csv", "xls", "kml", "gpx"]), "summary"]
    return list(dict.fromkeys(requested))


def _setup_logging(verbose: bool) -> None:
    """Configure logging for CLI usage from settings."""
    from fotocore.config.settings import ConfigurationError, Settings
    from fotocore.logging.logger import setup_logging

    try:
        settings = Settings()
    except ConfigurationError as e:
        logging.basicConfig(level=logging.INFO, stream=sys.stderr)
        logger.warning("Ignoring invalid configuration for logging: %s", e)
        return

    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=str(settings.log_file) if settings.log_file else None,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


if __name__ == "__main__":
    sys.exit(main())
