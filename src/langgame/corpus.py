"""
One-time acquisition of the LibreOffice dictionaries corpus.

The corpus is shallow-cloned with the ``git`` command line tool the first
time the server starts. Later starts reuse the existing directory as-is.
"""

import logging
import shutil
import subprocess
from pathlib import Path

from .config import GameConfig

logger = logging.getLogger("langgame")

# Directories in the corpus that hold no word data
PRUNED_DIRS = (".git", ".github", "util")


class CorpusError(Exception):
    """The dictionary corpus could not be fetched. Fatal at startup."""
    pass


def _prune(corpus_dir: Path) -> None:
    """Remove version control metadata and tooling directories, ignoring failures."""
    for name in PRUNED_DIRS:
        target = corpus_dir / name
        if target.exists():
            shutil.rmtree(target, ignore_errors=True)
            if target.exists():
                logger.debug(f"Could not remove {target}, leaving it in place")


def ensure_corpus(config: GameConfig) -> Path:
    """
    Make sure the dictionary corpus exists locally, cloning it if needed.

    Does nothing when the corpus directory already exists; there is no
    freshness check.

    Args:
        config: Server configuration (data_dir, repo_url, clone_timeout)

    Returns:
        Path to the corpus directory

    Raises:
        CorpusError: If the base directory cannot be created or the clone fails
    """
    corpus_dir = config.corpus_dir
    if corpus_dir.exists():
        logger.debug(f"Dictionary corpus already present at {corpus_dir}")
        return corpus_dir

    try:
        config.data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise CorpusError(f"Cannot create {config.data_dir}: {e}") from e

    logger.info(f"Cloning {config.repo_url} into {corpus_dir} (first run only)")
    try:
        result = subprocess.run(
            ["git", "clone", "--depth=1", config.repo_url, str(corpus_dir)],
            capture_output=True, text=True, timeout=config.clone_timeout,
        )
    except FileNotFoundError as e:
        raise CorpusError("git executable not found; install git to fetch dictionaries") from e
    except subprocess.TimeoutExpired as e:
        shutil.rmtree(corpus_dir, ignore_errors=True)
        raise CorpusError(
            f"git clone did not finish within {config.clone_timeout:.0f}s"
        ) from e

    if result.returncode != 0:
        shutil.rmtree(corpus_dir, ignore_errors=True)
        detail = (result.stderr or result.stdout or "").strip()
        raise CorpusError(f"git clone failed with exit code {result.returncode}: {detail}")

    _prune(corpus_dir)
    logger.info(f"Dictionary corpus ready at {corpus_dir}")
    return corpus_dir


__all__ = ["CorpusError", "PRUNED_DIRS", "ensure_corpus"]
