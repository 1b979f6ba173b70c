"""
Settings and configuration for MedMorph.

Values can be overridden through environment variables.
"""

import os

# Debug mode
DEBUG = os.environ.get("MEDMORPH_DEBUG", "").lower() in ("1", "true", "yes")

# Logging level used by the CLI
LOG_LEVEL = os.environ.get("MEDMORPH_LOG_LEVEL", "DEBUG" if DEBUG else "WARNING").upper()

# Shortest substring the segmenter will try to resolve against the lexicon
MIN_SEGMENT_LENGTH = 2

# Plural collapsing only applies to terms longer than this
PLURAL_MIN_LENGTH = 4

# Punctuation removed from raw user input
STRIPPED_PUNCTUATION = ".,!?;:"
