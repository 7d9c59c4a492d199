"""Unit tests for theme module.

Tests for color validation and Rich theme generation.
"""

import pytest
import treesweep.core.theme as theme_module
from rich.theme import Theme
from treesweep.core.theme import ThemeColors, get_rich_theme, get_theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.text == "#ffffff"
        assert colors.header == "#69B9A1"
        assert colors.success == "#03b971"
        assert colors.error == "#f53263"

    def test_valid_hex_colors(self) -> None:
        colors = ThemeColors(text="#AABBCC", muted="#abc", entry_file="#123456")
        assert colors.text == "#AABBCC"
        assert colors.muted == "#abc"
        assert colors.entry_file == "#123456"

    def test_invalid_hex_no_hash(self) -> None:
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(text="ffffff")

    def test_invalid_hex_wrong_length(self) -> None:
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(text="#ff")

    def test_invalid_hex_chars(self) -> None:
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(text="#gggggg")

    def test_non_string_rejected(self) -> None:
        with pytest.raises(ValueError, match="color must be a string"):
            ThemeColors(text=123)  # type: ignore[arg-type]

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValueError):
            ThemeColors(unknown_field="#ffffff")  # type: ignore[call-arg]


class TestRichTheme:
    """Tests for Rich theme generation."""

    def test_styles_present(self) -> None:
        theme = get_rich_theme()
        assert isinstance(theme, Theme)
        for name in ("success", "error", "info", "entry.file", "entry.directory", "entry.size"):
            assert name in theme.styles

    def test_custom_colors(self) -> None:
        theme = get_rich_theme(ThemeColors(entry_file="#000000"))
        assert str(theme.styles["entry.file"]) == "#000000"

    def test_get_theme_is_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(theme_module, "_cached_theme", None)
        first = get_theme()
        assert get_theme() is first
