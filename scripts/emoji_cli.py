from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from emoji_compact.core.dataset import INDEX_PATH, RAW_DATA_PATH, TYPES_PATH, index_digest, load_index, load_raw_records
from emoji_compact.core.lookup import EmojiLookup
from emoji_compact.core.reflector import generate_type_definitions
from emoji_compact.core.transform import SizeReport, clean_dataset, format_file_size

USAGE_EXAMPLES = """
examples:
  python scripts/emoji_cli.py clean    # process RawEmojiData.json into the compact EmojiData.json
  python scripts/emoji_cli.py info     # show statistics about the emoji data files
  python scripts/emoji_cli.py types    # generate type definitions from the emoji data
"""


def run_clean(raw_path: Path, output_path: Path) -> int:
    report = clean_dataset(raw_path, output_path)
    result = report.result
    print("Processing complete!")
    print(report.sizes.describe())
    print(f"Kept {result.total - result.skipped} of {result.total} records ({result.skipped} skipped)")
    print(f"Wrote {output_path}")
    return 0


def run_info(raw_path: Path, output_path: Path) -> int:
    raw_records = load_raw_records(raw_path)
    original_size = raw_path.stat().st_size

    print("Original emoji data:")
    print(f"   - Size: {format_file_size(original_size)}")
    print(f"   - Emoji count: {len(raw_records)}")

    if not output_path.exists():
        print('\nOptimized emoji data not found! Run "clean" first.')
        return 0

    index = load_index(output_path)
    lookup = EmojiLookup(index)
    sizes = SizeReport(original_bytes=original_size, compact_bytes=output_path.stat().st_size)

    print("\nOptimized emoji data:")
    print(f"   - Size: {format_file_size(sizes.compact_bytes)} ({sizes.reduction_percent:.2f}% reduction)")
    print(f"   - Emoji count: {lookup.total_count()}")
    print(f"   - Categories: {len(lookup.list_categories())}")
    print(f"   - Digest: {index_digest(index)}")
    return 0


def run_types(output_path: Path, types_path: Path) -> int:
    print("Generating type definitions...")
    categories = generate_type_definitions(output_path, types_path)
    print(f"Wrote {types_path} with {len(categories)} categories")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Emoji data manager",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("command", nargs="?", default="help", choices=["clean", "info", "types", "help"])
    parser.add_argument("--raw", type=Path, default=RAW_DATA_PATH, help="Raw emoji-datasource JSON array")
    parser.add_argument("--output", type=Path, default=INDEX_PATH, help="Compact category index")
    parser.add_argument("--types-output", type=Path, default=TYPES_PATH, help="Generated type definitions")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "clean":
            return run_clean(args.raw, args.output)
        if args.command == "info":
            return run_info(args.raw, args.output)
        if args.command == "types":
            return run_types(args.output, args.types_output)
    except (FileNotFoundError, ValueError) as exc:
        # json.JSONDecodeError is a ValueError.
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
