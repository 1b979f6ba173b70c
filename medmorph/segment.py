"""
Segmentation engine for MedMorph.

Splits a normalized medical term into morpheme segments using greedy
longest-match against the lexicon:

    cursor = 0
    while cursor < len(term):
        try term[cursor:cursor + n] for n = remaining length down to 2
        accept the first candidate that resolves to a lexicon entry
        otherwise emit term[cursor] as an unresolved segment

Known limitation: the search never backtracks. Once a segment is accepted
it is not reconsidered, even when a different choice would leave fewer
unresolved characters overall. For example, with entries "hyper" and
"pertension" only, "hypertension" becomes "hyper" followed by seven unresolved characters
rather than "h" + "y" + "pertension". The greedy policy is kept on purpose; an optimal
(e.g. fewest-unresolved) search would change observable output.

Both functions are pure: they read the immutable lexicon and allocate only
call-local data, so they are safe to call from multiple threads.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from medmorph.lexicon import Lexicon, MorphemeEntry, MorphemeKind, get_lexicon
from medmorph.settings import MIN_SEGMENT_LENGTH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Segment:
    """A contiguous piece of the input term, resolved or not."""
    text: str
    morpheme: Optional[MorphemeEntry] = None
    start: int = 0
    end: int = 0

    @property
    def is_resolved(self) -> bool:
        return self.morpheme is not None


def resolve(candidate: str, lexicon: Optional[Lexicon] = None) -> Optional[MorphemeEntry]:
    """
    Resolve a candidate substring to a single lexicon entry.

    When several entries share the candidate's normalized form, a ROOT
    entry wins over prefixes and suffixes, since roots carry the core
    meaning of a term. Without a ROOT among the matches, the first entry
    in lexicon declaration order is returned.

    Args:
        candidate: Substring to look up.
        lexicon: Lexicon to search. Defaults to get_lexicon().

    Returns:
        The chosen MorphemeEntry, or None if nothing matches.
    """
    if lexicon is None:
        lexicon = get_lexicon()

    matches = lexicon.lookup(candidate)
    if not matches:
        return None
    if len(matches) == 1:
        return matches[0]

    chosen = next((m for m in matches if m.kind == MorphemeKind.ROOT), matches[0])
    logger.debug(
        f"Ambiguous lexicon form {candidate!r}: "
        f"{[(m.surface_form, m.kind.value) for m in matches]} -> {chosen.surface_form} ({chosen.kind.value})"
    )
    return chosen


def segment(term: str, lexicon: Optional[Lexicon] = None) -> List[Segment]:
    """
    Split a normalized term into segments by greedy longest match.

    The term is expected to be lower-cased and free of hyphens already
    (see characters.prepare_term). Concatenating the returned segment
    texts always reproduces the term exactly.

    Args:
        term: Normalized term.
        lexicon: Lexicon to match against. Defaults to get_lexicon().

    Returns:
        Segments in input order. Empty for an empty term.
    """
    if lexicon is None:
        lexicon = get_lexicon()

    segments: List[Segment] = []
    cursor = 0
    size = len(term)

    while cursor < size:
        accepted = None
        for end in range(size, cursor + MIN_SEGMENT_LENGTH - 1, -1):
            morpheme = resolve(term[cursor:end], lexicon)
            if morpheme is not None:
                accepted = Segment(term[cursor:end], morpheme, cursor, end)
                break

        if accepted is None:
            # No match of length >= MIN_SEGMENT_LENGTH: consume one character
            accepted = Segment(term[cursor], None, cursor, cursor + 1)

        segments.append(accepted)
        cursor = accepted.end

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Segmented {term!r}: {[s.text for s in segments]}")

    return segments


def matched_morphemes(segments: Sequence[Segment]) -> List[MorphemeEntry]:
    """Resolved morphemes of a segmentation, in order."""
    return [s.morpheme for s in segments if s.morpheme is not None]


def unresolved_count(segments: Sequence[Segment]) -> int:
    """Number of characters left unresolved."""
    return sum(len(s.text) for s in segments if s.morpheme is None)
