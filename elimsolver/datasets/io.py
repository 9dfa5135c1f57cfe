"""
Dictionary loading.

The Dictionary is built once, by an explicit call, and is read-only
afterwards; any number of solvers may share the same instance.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

from elimsolver.engine.types import WORD_LENGTH
from elimsolver.errors import DictionaryLoadFailure

log = logging.getLogger(__name__)

DEFAULT_WORDLIST_PATH = str(Path("data") / "wordle.txt")
WORDLIST_ENV_VAR = "ELIMSOLVER_WORDLIST"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises DictionaryLoadFailure if the path doesn't exist or can't be read.
    """
    p = Path(p)
    if not p.exists():
        raise DictionaryLoadFailure(f"Word list not found at path: {p}")
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryLoadFailure(f"Word list unreadable at path: {p} ({e})") from e
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def normalize_words(lines: Iterable[str], n: int = WORD_LENGTH) -> List[str]:
    """
    Trim, lowercase, keep only length-n tokens, stable dedupe.
    """
    seen, out = set(), []
    for raw in lines:
        w = raw.strip().lower()
        if len(w) != n or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out


class Dictionary:
    """
    Immutable, ordered master word list.

    Iteration order is the order of first appearance in the source, which
    is also the order solvers break score ties in.
    """

    __slots__ = ("_words", "_lookup", "source", "n")

    def __init__(self, words: Tuple[str, ...], *, source: str | None = None, n: int = WORD_LENGTH):
        self._words = tuple(words)
        self._lookup = frozenset(self._words)
        self.source = source
        self.n = n

    @classmethod
    def from_words(cls, words: Iterable[str], n: int = WORD_LENGTH) -> "Dictionary":
        return cls(tuple(normalize_words(words, n)), n=n)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def lookup(self) -> frozenset:
        return self._lookup

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._lookup

    def __getitem__(self, i: int) -> str:
        return self._words[i]

    def __repr__(self) -> str:
        return f"Dictionary({len(self)} words, source={self.source!r})"


def load_dictionary(path: Path | str | None = None, n: int = WORD_LENGTH) -> Dictionary:
    """
    Load and normalize a newline-separated word list.

    With no `path`, reads $ELIMSOLVER_WORDLIST if set, else DEFAULT_WORDLIST_PATH.

    Raises:
        DictionaryLoadFailure: file missing/unreadable, or no length-n words in it.
    """
    if path is None:
        path = os.environ.get(WORDLIST_ENV_VAR) or DEFAULT_WORDLIST_PATH
    lines = read_lines(path)
    words = normalize_words(lines, n)
    if not words:
        raise DictionaryLoadFailure(f"Word list at {path} contains no {n}-letter words")
    log.info("Loaded %d %d-letter words from %s (%d lines read)", len(words), n, path, len(lines))
    return Dictionary(tuple(words), source=str(path), n=n)

