"""
Tests for the language alias table.
"""

import pytest

from langgame.aliases import LANGUAGE_ALIASES, resolve_display_name


class TestLanguageAliases:
    """Tests for LANGUAGE_ALIASES."""

    def test_is_read_only(self) -> None:
        """The table cannot be modified at runtime."""
        with pytest.raises(TypeError):
            LANGUAGE_ALIASES["xx"] = "Nowhere"  # type: ignore[index]

    @pytest.mark.parametrize("code,name", [
        ("en", "English"),
        ("ne", "Nepali"),
        ("fr", "French"),
        ("pt", "Portuguese"),
    ])
    def test_repeated_codes_resolve_to_last_value(self, code: str, name: str) -> None:
        """Codes listed more than once keep their final value."""
        assert LANGUAGE_ALIASES[code] == name

    def test_several_codes_share_a_name(self) -> None:
        """Regional variants map to one display name."""
        assert {LANGUAGE_ALIASES[c] for c in ("no", "nn", "nb")} == {"Norwegian"}

    def test_keys_are_lowercase_and_trimmed(self) -> None:
        """Keys match the normalized codes produced by discovery."""
        for code in LANGUAGE_ALIASES:
            assert code == code.lower().strip()

    def test_lookup_is_case_sensitive(self) -> None:
        """Callers must lowercase before lookup."""
        assert "FR" not in LANGUAGE_ALIASES


class TestResolveDisplayName:
    """Tests for resolve_display_name."""

    def test_code_preferred_over_base(self) -> None:
        """A full code match wins."""
        assert resolve_display_name("ca-valencia", "ca-valencia") == "Valencian"
        assert resolve_display_name("sr-latn", "sr-latn") == "Serbian"

    def test_falls_back_to_base(self) -> None:
        """Regional codes resolve through their base."""
        assert resolve_display_name("pt_br", "pt") == "Portuguese"

    def test_unknown(self) -> None:
        """Neither code nor base known."""
        assert resolve_display_name("xx-unknown", "xx-unknown") is None
