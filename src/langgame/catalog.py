"""
Language catalog built from the dictionary corpus.

This module handles:
- Discovering one Hunspell ``.dic`` file per language bundle directory
- Loading and filtering the word lists
- Resolving display names through the alias table
- Holding the resulting read-only catalog shared by all request handlers

The catalog is built once, before the server accepts connections, and is
never modified afterwards.
"""

from __future__ import annotations

import logging
import os
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

import regex

from .aliases import resolve_display_name
from .config import (
    DICTIONARY_EXTENSION,
    DISCOVERY_MAX_DEPTH,
    MIN_WORD_LEN,
    WORDS_PER_ROUND,
)

logger = logging.getLogger("langgame")

_ALPHABETIC_RE = regex.compile(r"\p{Alphabetic}+")


class EmptyCatalogError(Exception):
    """No playable language is available."""
    pass


@dataclass
class RawBundle:
    """A corpus directory holding a dictionary file.

    Attributes:
        code: Lowercase directory name (``pt_br``).
        base: Code truncated at the first underscore (``pt``).
        dictionary_path: The ``.dic`` file found in the directory.
    """
    code: str
    base: str
    dictionary_path: Path


@dataclass(frozen=True)
class LanguageEntry:
    """A playable language.

    Attributes:
        code: Lowercase bundle code, echoed back by clients on hint requests.
        base: Code with any regional suffix removed.
        display_name: Name shown to players and used as the answer.
        words: Qualifying words in file order.
        valid_answers: Lowercase guesses accepted as correct.
    """
    code: str
    base: str
    display_name: str
    words: tuple[str, ...]
    valid_answers: frozenset[str]


# =============================================================================
# Discovery
# =============================================================================

def _split_code(dir_name: str) -> tuple[str, str]:
    code = dir_name.lower()
    return code, code.split("_", 1)[0]


def _find_dictionary_file(directory: Path) -> Path | None:
    """Return the first ``.dic`` file directly inside ``directory``."""
    try:
        children = sorted(directory.iterdir())
    except OSError as e:
        logger.debug(f"Cannot list {directory}: {e}")
        return None
    for child in children:
        if child.suffix == DICTIONARY_EXTENSION and child.is_file():
            return child
    return None


def _walk_directories(root: Path, max_depth: int) -> Iterator[Path]:
    """Yield directories 1..max_depth levels below root, depth first, sorted."""
    for dirpath, dirnames, _ in os.walk(root):
        dirnames.sort()
        depth = len(Path(dirpath).relative_to(root).parts)
        if depth >= max_depth:
            dirnames.clear()
        if depth >= 1:
            yield Path(dirpath)


def discover_dictionaries(root: Path) -> list[RawBundle]:
    """
    Find language bundles in the corpus tree.

    Every directory up to three levels below ``root`` is a candidate; those
    without a dictionary file are skipped.

    Args:
        root: Corpus directory

    Returns:
        Bundles in walk order
    """
    bundles: list[RawBundle] = []
    for directory in _walk_directories(Path(root), DISCOVERY_MAX_DEPTH):
        dictionary = _find_dictionary_file(directory)
        if dictionary is None:
            continue
        code, base = _split_code(directory.name)
        bundles.append(RawBundle(code=code, base=base, dictionary_path=dictionary))
    return bundles


# =============================================================================
# Loading
# =============================================================================

def is_playable_word(word: str) -> bool:
    """
    Check that a word is long enough and made only of letters.

    Length is measured in UTF-8 bytes, so two-syllable Korean or two-letter
    Cyrillic words qualify. Every character must have the Unicode Alphabetic
    property: vowel signs of abugida scripts pass, while digits, punctuation,
    hyphens, whitespace and free combining accents do not.
    """
    if len(word.encode("utf-8")) < MIN_WORD_LEN:
        return False
    return _ALPHABETIC_RE.fullmatch(word) is not None


def load_dictionary(path: Path) -> list[str]:
    """
    Read the qualifying words of a Hunspell ``.dic`` file.

    Only the text before the first ``/`` of each line is considered (the rest
    holds affix flags). Lines that are not valid UTF-8 are skipped.

    Args:
        path: Dictionary file

    Returns:
        Qualifying words in file order

    Raises:
        OSError: If the file cannot be read
    """
    words: list[str] = []
    with open(path, "rb") as f:
        for raw_line in f:
            try:
                line = raw_line.rstrip(b"\r\n").decode("utf-8")
            except UnicodeDecodeError:
                continue
            word = line.split("/", 1)[0]
            if is_playable_word(word):
                words.append(word)
    return words


def build_valid_answers(code: str, name: str) -> frozenset[str]:
    """Accepted guesses: the lowercase code, its base, and the lowercase name."""
    lowered = code.lower()
    return frozenset({lowered, lowered.split("_", 1)[0], name.lower()})


# =============================================================================
# Catalog
# =============================================================================

class Catalog:
    """
    Immutable, ordered collection of playable languages.

    One instance is built at startup and shared by reference with every
    request handler.
    """

    def __init__(self, entries: Iterable[LanguageEntry] = ()) -> None:
        self._entries: tuple[LanguageEntry, ...] = tuple(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LanguageEntry]:
        return iter(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    @property
    def entries(self) -> tuple[LanguageEntry, ...]:
        return self._entries

    def find(self, code: str) -> LanguageEntry | None:
        """
        Find the first entry whose code or base equals ``code`` (case-insensitive).

        Args:
            code: Language code sent by a client

        Returns:
            The matching entry, or None
        """
        wanted = code.lower()
        for entry in self._entries:
            if entry.code == wanted or entry.base == wanted:
                return entry
        return None

    def choose(self) -> LanguageEntry:
        """
        Pick an entry uniformly at random.

        Raises:
            EmptyCatalogError: If the catalog has no entries
        """
        if not self._entries:
            raise EmptyCatalogError("No languages loaded")
        return random.choice(self._entries)

    def display_names(self) -> list[str]:
        """Sorted, de-duplicated display names of all entries."""
        return sorted({entry.display_name for entry in self._entries}, key=str.lower)


def load_all_languages(root: Path) -> Catalog:
    """
    Build the language catalog from a corpus directory.

    Bundles are dropped, never fatal, when their code is not in the alias
    table, their dictionary cannot be read, or they have fewer than
    ``WORDS_PER_ROUND`` qualifying words.

    Args:
        root: Corpus directory

    Returns:
        The catalog, in discovery order
    """
    entries: list[LanguageEntry] = []
    for bundle in discover_dictionaries(root):
        name = resolve_display_name(bundle.code, bundle.base)
        if name is None:
            logger.debug(f"Skipping '{bundle.code}': no display name")
            continue

        try:
            words = load_dictionary(bundle.dictionary_path)
        except OSError as e:
            logger.warning(f"Skipping '{bundle.code}': cannot read {bundle.dictionary_path}: {e}")
            continue

        if len(words) < WORDS_PER_ROUND:
            logger.debug(f"Skipping '{bundle.code}': only {len(words)} usable words")
            continue

        entries.append(LanguageEntry(
            code=bundle.code,
            base=bundle.base,
            display_name=name,
            words=tuple(words),
            # The display name stands in for the code here, so raw corpus
            # codes like "fr" are not accepted as guesses.
            valid_answers=build_valid_answers(name, name),
        ))

    catalog = Catalog(entries)
    logger.info(f"Loaded {len(catalog)} languages from {root}")
    return catalog


__all__ = [
    "Catalog",
    "EmptyCatalogError",
    "LanguageEntry",
    "RawBundle",
    "build_valid_answers",
    "discover_dictionaries",
    "is_playable_word",
    "load_all_languages",
    "load_dictionary",
]
