"""
Tests for package metadata.
"""

from importlib.metadata import PackageNotFoundError, version

import langgame


class TestVersion:
    """Tests for langgame.__version__."""

    def test_matches_installed_metadata(self) -> None:
        """The version comes from the installed distribution, never a stale copy."""
        try:
            expected = version("langgame")
        except PackageNotFoundError:
            expected = "0+unknown"
        assert langgame.__version__ == expected
