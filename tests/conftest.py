"""Shared test fixtures."""

import pytest

from medmorph.lexicon import Lexicon, MorphemeEntry, MorphemeKind, get_lexicon


def make_entry(term: str, kind: MorphemeKind, normalized: str = None, definition: str = "") -> MorphemeEntry:
    """Build an entry the way the data set spells it: 'cardio-', '-itis'."""
    if normalized is None:
        normalized = term.strip("-").lower()
    return MorphemeEntry(
        surface_form=term,
        normalized_form=normalized,
        kind=kind,
        definition=definition or f"meaning of {normalized}",
        short_definition=normalized,
    )


@pytest.fixture
def lexicon() -> Lexicon:
    """The default compiled-in lexicon."""
    return get_lexicon()


@pytest.fixture
def small_lexicon() -> Lexicon:
    """A hand-written lexicon independent of the shipped data."""
    return Lexicon([
        make_entry("athero-", MorphemeKind.ROOT),
        make_entry("-sclerosis", MorphemeKind.SUFFIX),
        make_entry("cardio-", MorphemeKind.ROOT),
        make_entry("-itis", MorphemeKind.SUFFIX),
        make_entry("hyper-", MorphemeKind.PREFIX),
        make_entry("-logy", MorphemeKind.SUFFIX),
    ])


@pytest.fixture
def visual_board_payload() -> dict:
    """A well-formed collaborator response in its camelCase JSON shape."""
    return {
        "originalTerm": "atherosclerosis",
        "morphemeBreakdown": [
            {
                "term": "athero-",
                "type": "RT",
                "definition": "fatty deposit, soft gruel-like deposit, plaque",
                "shortDefinition": "fatty deposit",
                "alternatives": ["plaque", "gruel"],
                "misspellings": ["athro", "atero"],
                "whereFound": "start",
                "sourceInfo": "athero- (RT)",
            },
            {
                "term": "-sclerosis",
                "type": "SF",
                "definition": "hardening",
                "shortDefinition": "hardening",
                "whereFound": "end",
            },
        ],
        "assembledDefinition": "hardening of the arteries caused by fatty deposits",
        "rephraseOptions": {
            "elementary": "Pipes getting clogged and stiff.",
            "highschool": "Plaque builds up and makes arteries hard.",
            "professional": "Chronic arterial wall thickening due to lipid plaque.",
        },
        "pronunciation": {
            "syllables": ["ath", "er", "o", "scle", "ro", "sis"],
            "stressedSyllableIndex": 4,
            "phonetic": "ˌæθ.ə.roʊ.skləˈroʊ.sɪs",
            "isApproximate": True,
        },
        "usage": {
            "patientFriendly": "Your arteries have some hardening.",
            "textbook": "Atherosclerosis is a form of arteriosclerosis.",
            "chartNote": "Hx of ASCVD.",
        },
        "similarWords": [
            {"word": "arteriosclerosis", "status": "real", "morphemes": ["arterio-", "-sclerosis"]},
        ],
        "confusables": [
            {"term": "arteriosclerosis", "meaning": "hardening of arteries", "difference": "broader term"},
        ],
        "mnemonic": "A THick HERO gets SCLERotic.",
        "mediaKeywords": ["Wikimedia Commons atherosclerosis"],
        "splitReasoning": 'Exact match on root "athero" and suffix "sclerosis"',
    }
