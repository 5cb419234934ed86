# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Command-line interface for exifbridge

Reads a JSON object of source attribute names to string values and prints
the grouped tag descriptions.

Copyright 2025 DNAi inc.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

from loguru import logger

from exifbridge import __version__
from exifbridge.catalog import TagGroup
from exifbridge.exceptions import ExifBridgeError, SourceStoreError
from exifbridge.log_config import LOG_LEVELS, init_logging
from exifbridge.source_store import MappingSourceStore
from exifbridge.translator import TagTranslator, TranslationConfig


def format_output(groups: Dict[str, Dict[str, str]], format_type: str = "text") -> str:
    """
    Format grouped descriptions based on format type.

    Args:
        groups: Mapping of group label to {tag name: description}
        format_type: Output format ('text', 'json', 'csv')

    Returns:
        Formatted output string
    """
    if format_type == "json":
        return json.dumps(groups, indent=2, ensure_ascii=False)
    elif format_type == "csv":
        lines = ["Group,Tag,Value"]
        for group, tags in groups.items():
            for tag, value in sorted(tags.items()):
                # Escape quotes in CSV
                value_str = str(value).replace('"', '""')
                lines.append(f'"{group}","{tag}","{value_str}"')
        return "\n".join(lines)
    else:  # text format (default)
        lines = []
        for group, tags in groups.items():
            if lines:
                lines.append("")
            lines.append(f"[{group}]")
            for tag, value in sorted(tags.items()):
                lines.append(f"{tag}: {value}")
        return "\n".join(lines)


def read_source(path: str) -> MappingSourceStore:
    """
    Load a source store from a JSON file, or from stdin when path is "-".

    Raises:
        SourceStoreError: If the input is not UTF-8 or not a flat attribute object
        OSError: If the file cannot be read
    """
    try:
        if path == "-":
            text = sys.stdin.read()
        else:
            text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SourceStoreError(f"Source is not valid UTF-8: {e}") from e
    return MappingSourceStore.from_json(text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exifbridge",
        description="Describe EXIF attributes reported as flat strings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Describe all groups
  exifbridge attributes.json

  # GPS only, as JSON
  exifbridge --group GPS --format json attributes.json

  # Read attributes from stdin
  cat attributes.json | exifbridge -
""",
    )
    parser.add_argument("source", help="JSON object of attribute names to values, or - for stdin")
    parser.add_argument(
        "--format", "-f",
        dest="format_type",
        choices=["text", "json", "csv"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--group", "-g",
        dest="groups",
        action="append",
        choices=[group.label for group in TagGroup],
        help="Only describe this group (repeatable)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Minimum level of log messages written to stderr (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    init_logging(args.log_level)

    try:
        source = read_source(args.source)
    except (ExifBridgeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug("loaded {} attributes from {}", len(source), args.source)
    translator = TagTranslator(config=TranslationConfig(groups=args.groups))
    groups = translator.describe_all(source)

    output = format_output(groups, args.format_type)
    if output:
        print(output)
    return 0
