"""
Pytest configuration and fixtures for langgame tests.

Provides a small synthetic dictionary corpus laid out like the LibreOffice
dictionaries repository.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path to allow importing langgame
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from langgame.catalog import Catalog, load_all_languages  # noqa: E402

from helpers import FRENCH_WORDS, NONSENSE_WORDS, PORTUGUESE_WORDS, write_dictionary  # noqa: E402


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """Corpus with one French bundle and one bundle missing from the alias table."""
    root = tmp_path / "dictionaries"
    write_dictionary(root / "fr", "fr.dic", FRENCH_WORDS)
    (root / "fr" / "fr.aff").write_text("SET UTF-8\n", encoding="utf-8")
    write_dictionary(root / "xx-unknown", "xx.dic", NONSENSE_WORDS)
    return root


@pytest.fixture
def multi_corpus_dir(corpus_dir: Path) -> Path:
    """Corpus with French, Brazilian Portuguese, a too-small bundle and noise."""
    write_dictionary(corpus_dir / "pt_BR", "pt_BR.dic", PORTUGUESE_WORDS)
    write_dictionary(corpus_dir / "de", "de.dic", ["haus", "katze", "hund"])
    (corpus_dir / "util").mkdir()
    (corpus_dir / "util" / "README").write_text("tools\n", encoding="utf-8")
    return corpus_dir


@pytest.fixture
def catalog(multi_corpus_dir: Path) -> Catalog:
    """Catalog built from the multi-language corpus."""
    return load_all_languages(multi_corpus_dir)
