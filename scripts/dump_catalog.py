#!/usr/bin/env python3
"""
Dump the spell catalog built from a sheets directory.

Usage:
    python scripts/dump_catalog.py
    python scripts/dump_catalog.py --data-dir path/to/sheets --format json

Prints one line per spell in display order:
    <action id> // #<number> <name> // <cast> // <recast>

Useful for checking a new data drop: a join or parse failure is reported
and the script exits non-zero.
"""

import argparse
import json
import sys
from pathlib import Path

# Add backend directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from core import get_settings, setup_logging  # noqa: E402
from domain.exceptions import CatalogLoadError, ConfigurationError  # noqa: E402
from infrastructure.row_store import YamlRowStore  # noqa: E402
from services.catalog_service import build_catalog  # noqa: E402
from services.display_service import to_action_entry  # noqa: E402


def main():
    parser = argparse.ArgumentParser(
        description="Dump the spell catalog built from game-data sheets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--data-dir", "-d", help="Sheets directory (default: configured DATA_DIR)")
    parser.add_argument(
        "--format", "-f", choices=["text", "json"], default="text", help="Output format (default: text)"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    args = parser.parse_args()
    setup_logging(debug_mode=args.verbose)

    data_dir = Path(args.data_dir) if args.data_dir else get_settings().sheets_dir

    try:
        catalog = build_catalog(YamlRowStore(data_dir))
    except (CatalogLoadError, ConfigurationError) as e:
        print(f"❌ Catalog failed to load: {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        print(json.dumps([to_action_entry(record).model_dump() for record in catalog], indent=2, ensure_ascii=False))
        return 0

    for entry in map(to_action_entry, catalog):
        print(f"{entry.action_id} // #{entry.display_number} {entry.name} // {entry.cast_time} // {entry.recast_time}")

    print(f"\n{len(catalog)} spells")
    return 0


if __name__ == "__main__":
    sys.exit(main())
