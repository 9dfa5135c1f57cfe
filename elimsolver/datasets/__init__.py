from .io import (
    DEFAULT_WORDLIST_PATH, Dictionary, load_dictionary, normalize_words, read_lines,
)
from .validator import validate_wordlist, pretty_summary

__all__ = [
    "DEFAULT_WORDLIST_PATH", "Dictionary", "load_dictionary", "normalize_words",
    "read_lines", "validate_wordlist", "pretty_summary",
]
