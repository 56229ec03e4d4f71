"""
Tests for the command-line entry point.

The corpus clone and the Uvicorn server are patched out.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from langgame.corpus import CorpusError
from langgame.main import main, parse_args


class TestParseArgs:
    """Tests for parse_args."""

    def test_defaults_are_none(self) -> None:
        """Unset options fall through to the environment."""
        args = parse_args([])
        assert args.host is None
        assert args.port is None
        assert args.data_dir is None

    def test_values(self) -> None:
        """Options are typed."""
        args = parse_args(["--port", "9000", "--data-dir", "/srv/lg"])
        assert args.port == 9000
        assert args.data_dir == Path("/srv/lg")


class TestMain:
    """Tests for main."""

    def test_builds_catalog_before_serving(self, multi_corpus_dir: Path) -> None:
        """The server receives a fully built catalog and is then run."""
        data_dir = multi_corpus_dir.parent

        with patch("langgame.main.load_dotenv"), \
                patch("langgame.server.uvicorn.run") as run:
            main(["--data-dir", str(data_dir), "--port", "9000"])

        run.assert_called_once()
        app = run.call_args.args[0]
        assert run.call_args.kwargs["port"] == 9000
        assert app is not None

    def test_corpus_failure_exits(self, tmp_path: Path) -> None:
        """A failed clone stops startup with exit status 1."""
        with patch("langgame.main.load_dotenv"), \
                patch("langgame.main.ensure_corpus", side_effect=CorpusError("boom")), \
                patch("langgame.server.uvicorn.run") as run:
            with pytest.raises(SystemExit) as exc:
                main(["--data-dir", str(tmp_path)])

        assert exc.value.code == 1
        run.assert_not_called()

    def test_missing_home_exits(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without HOME or --data-dir the server refuses to start."""
        monkeypatch.delenv("HOME", raising=False)
        monkeypatch.delenv("LANGGAME_DATA_DIR", raising=False)

        with patch("langgame.main.load_dotenv"):
            with pytest.raises(SystemExit) as exc:
                main([])

        assert exc.value.code == 1
