"""
Command line interface for medmorph.

Usage:
    python -m medmorph.cli "atherosclerosis"
    python -m medmorph.cli -i "atherosclerosis"  # with definitions
    python -m medmorph.cli -f "atherosclerosis"  # full JSON
"""

import argparse
import logging
import sys
from typing import Optional

from medmorph import __version__, analyze
from medmorph.constants import DISCLAIMER
from medmorph.lexicon import get_lexicon
from medmorph.models import DecodeResult
from medmorph.settings import LOG_LEVEL

logger = logging.getLogger(__name__)


def format_segments_text(result: DecodeResult) -> str:
    """Format segments on one line, e.g. 'athero + sclerosis'."""
    return ' + '.join(s.text for s in result.segments)


def format_info_text(result: DecodeResult) -> str:
    """Format segment list with the morpheme behind each segment."""
    lines = [format_segments_text(result)]

    for seg in result.segments:
        if seg.morpheme is None:
            lines.append(f"* {seg.text}  (no match)")
            continue
        m = seg.morpheme
        lines.append(f"* {seg.text}  [{m.type.display_name}] {m.term}: {m.short_definition}")
        if m.definition and m.definition != m.short_definition:
            lines.append(f"    {m.definition}")

    if result.unresolved_count:
        lines.append('')
        lines.append(f"{result.unresolved_count} character(s) not covered by any morpheme")

    lines.append('')
    lines.append(DISCLAIMER)
    return '\n'.join(lines)


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description='Command line interface for MedMorph (medical term morpheme decoder)',
        prog='medmorph',
    )

    parser.add_argument(
        'text',
        nargs='*',
        help='Medical term to decode',
    )

    parser.add_argument(
        '-i', '--with-info',
        action='store_true',
        help='Print morpheme definitions for each segment',
    )

    parser.add_argument(
        '-f', '--full',
        action='store_true',
        help='Full segmentation as JSON',
    )

    parser.add_argument(
        '-d', '--debug',
        action='store_true',
        help='Log lexicon lookups and tie-breaks',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parsed = parser.parse_args(args)

    if parsed.version:
        print(f'medmorph {__version__}')
        return 0

    logging.basicConfig(
        level=logging.DEBUG if parsed.debug else LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    text = ' '.join(parsed.text) if parsed.text else ''

    if not text.strip():
        parser.print_help()
        return 1

    try:
        result = analyze(text, get_lexicon())
    except Exception as e:
        print(f'Error processing text: {e}', file=sys.stderr)
        return 1

    if result.is_empty:
        print(f'Error: nothing to decode in {text!r}', file=sys.stderr)
        return 1

    if parsed.full:
        print(result.model_dump_json(indent=2))
    elif parsed.with_info:
        print(format_info_text(result))
    else:
        print(format_segments_text(result))

    return 0


if __name__ == '__main__':
    sys.exit(main())
