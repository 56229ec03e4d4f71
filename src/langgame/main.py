"""
Command-line entry point: fetch the corpus, build the catalog, serve.
"""

import argparse
import logging
from pathlib import Path

from dotenv import load_dotenv

from .catalog import load_all_languages
from .config import ConfigError, GameConfig
from .corpus import CorpusError, ensure_corpus
from .server import GameServer

logger = logging.getLogger("langgame")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Every option falls back to its LANGGAME_* environment variable.
    """
    parser = argparse.ArgumentParser(
        description="Guess the language from ten of its words",
    )
    parser.add_argument("--host", help="Bind address (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, help="Port (default: 8000)")
    parser.add_argument(
        "--data-dir",
        type=Path,
        help="Directory for the dictionary corpus (default: ~/.langgame)",
    )
    parser.add_argument("--log-level", help="Logging level (default: INFO)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the langgame server."""
    args = parse_args(argv)
    load_dotenv()

    try:
        config = GameConfig.from_env(
            host=args.host,
            port=args.port,
            data_dir=args.data_dir,
            log_level=args.log_level,
        )
    except ConfigError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(str(e))
        raise SystemExit(1) from e

    logging.basicConfig(level=config.log_level)

    try:
        corpus_dir = ensure_corpus(config)
    except CorpusError as e:
        logger.error(f"Cannot start without dictionaries: {e}")
        raise SystemExit(1) from e

    logger.info("Loading dictionaries into memory...")
    catalog = load_all_languages(corpus_dir)
    if not catalog:
        logger.error(f"No playable languages found in {corpus_dir}")

    server = GameServer(catalog, host=config.host, port=config.port)
    server.run(log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
