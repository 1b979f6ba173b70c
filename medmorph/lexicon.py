"""
Morpheme lexicon for MedMorph.

The lexicon is an immutable table of MorphemeEntry records indexed by
normalized form. Entries may be stored with inconsistent normalization
(e.g. a normalized_term that disagrees with the hyphenated term), so each
entry is reachable both through its stored normalized form and through the
normalized version of its surface form.

Duplicate entries are allowed. Lookups return every match in declaration
order; choosing between them is the segmenter's job (see segment.resolve).

The default lexicon is built lazily from constants.MORPHEME_DATA, once per
process, behind a lock.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from medmorph.constants import (
    MORPHEME_DATA, TYPE_NAMES, TYPE_PREFIX, TYPE_ROOT, TYPE_SUFFIX,
)

logger = logging.getLogger(__name__)

HYPHEN = "-"


def normalize(raw: str) -> str:
    """
    Normalize a morpheme or candidate string for lookup.

    Strips the hyphen marker from both ends and lower-cases.
    A run of hyphens at either end is stripped entirely so that the
    function is idempotent.

    Examples:
        >>> normalize("cardio-")
        'cardio'
        >>> normalize("-ITIS")
        'itis'
    """
    return raw.strip(HYPHEN).lower()


class MorphemeKind(str, Enum):
    """Position class of a morpheme."""
    PREFIX = TYPE_PREFIX
    ROOT = TYPE_ROOT
    SUFFIX = TYPE_SUFFIX

    @property
    def display_name(self) -> str:
        return TYPE_NAMES[self.value]

    @classmethod
    def parse(cls, value) -> "MorphemeKind":
        """Accept a kind, a short code ('RT') or a name ('root')."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for kind in cls:
            if text.upper() == kind.value or text.upper() == kind.name:
                return kind
        raise ValueError(f"Unknown morpheme type: {value!r}")


@dataclass(frozen=True)
class MorphemeEntry:
    """A single lexicon record."""
    surface_form: str
    normalized_form: str
    kind: MorphemeKind
    definition: str = ""
    short_definition: str = ""

    @classmethod
    def from_record(cls, row: Mapping[str, str]) -> "MorphemeEntry":
        """Build an entry from a data-set row (see constants.MORPHEME_DATA)."""
        term = row["term"]
        normalized = row.get("normalized_term")
        if normalized is None:
            normalized = normalize(term)
        definition = row.get("definition", "")
        return cls(
            surface_form=term,
            normalized_form=normalized,
            kind=MorphemeKind.parse(row["type"]),
            definition=definition,
            short_definition=row.get("short_definition") or definition,
        )

    def lookup_keys(self) -> Tuple[str, ...]:
        """Keys this entry is indexed under, without duplicates."""
        return tuple(dict.fromkeys((self.normalized_form, normalize(self.surface_form))))


class Lexicon:
    """
    Immutable morpheme table indexed by normalized form.

    Args:
        entries: MorphemeEntry records in declaration order. The order is
            significant: it decides ties in segment.resolve.
    """

    def __init__(self, entries: Iterable[MorphemeEntry]):
        self._entries: Tuple[MorphemeEntry, ...] = tuple(entries)
        index: Dict[str, List[MorphemeEntry]] = {}
        for entry in self._entries:
            for key in entry.lookup_keys():
                index.setdefault(key, []).append(entry)
        self._index: Dict[str, Tuple[MorphemeEntry, ...]] = {
            key: tuple(bucket) for key, bucket in index.items()
        }

    @classmethod
    def from_records(cls, rows: Iterable[Mapping[str, str]]) -> "Lexicon":
        return cls(MorphemeEntry.from_record(row) for row in rows)

    @property
    def entries(self) -> Tuple[MorphemeEntry, ...]:
        return self._entries

    def lookup(self, candidate: str) -> Tuple[MorphemeEntry, ...]:
        """
        Find every entry matching a candidate string.

        An entry matches when its stored normalized form, or the normalized
        version of its surface form, equals normalize(candidate).

        Returns:
            Matching entries in declaration order; empty if none match.
        """
        return self._index.get(normalize(candidate), ())

    def ambiguous_forms(self) -> Dict[str, Tuple[MorphemeEntry, ...]]:
        """Keys shared by more than one entry, for lexicon diagnostics."""
        return {key: bucket for key, bucket in self._index.items() if len(bucket) > 1}

    def __contains__(self, candidate: object) -> bool:
        if not isinstance(candidate, str):
            return False
        return normalize(candidate) in self._index

    def __iter__(self) -> Iterator[MorphemeEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Lexicon({len(self._entries)} entries, {len(self._index)} keys)"


# ============================================================================
# Default Lexicon
# ============================================================================

_default_lexicon: Optional[Lexicon] = None

# Lock for thread-safe lexicon initialization
_lexicon_lock = threading.Lock()


def get_lexicon() -> Lexicon:
    """Get the process-wide lexicon, building it on first use."""
    global _default_lexicon

    if _default_lexicon is not None:
        return _default_lexicon

    with _lexicon_lock:
        if _default_lexicon is None:
            lexicon = Lexicon.from_records(MORPHEME_DATA)
            ambiguous = lexicon.ambiguous_forms()
            if ambiguous:
                logger.debug(f"Default lexicon has {len(ambiguous)} ambiguous forms: {sorted(ambiguous)}")
            logger.debug(f"Built default lexicon: {lexicon!r}")
            _default_lexicon = lexicon

    return _default_lexicon


def is_lexicon_ready() -> bool:
    """Check if the default lexicon has been built."""
    return _default_lexicon is not None


def reset_lexicon() -> None:
    """Drop the default lexicon so the next get_lexicon() rebuilds it."""
    global _default_lexicon

    with _lexicon_lock:
        _default_lexicon = None
