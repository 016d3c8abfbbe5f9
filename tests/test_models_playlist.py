"""Tests for the Playlist and Settings models."""

import logging

import pytest

from nittu.errors import ValidationError
from nittu.models.playlist import DEFAULT_PLAYLIST_DELAY_MS, MAX_SLIDES, Playlist
from nittu.models.settings import Settings
from nittu.models.slide import Slide
from nittu.models.style import FontFamily


class TestPlaylist:
    """Test playlist construction."""

    def test_defaults(self) -> None:
        """Test an empty draft."""
        playlist = Playlist()
        assert playlist.name == ""
        assert playlist.slides == ()
        assert playlist.delay_ms == DEFAULT_PLAYLIST_DELAY_MS
        assert not playlist.has_name

    def test_slides_frozen_to_tuple(self) -> None:
        """Test that a slide list is stored as a tuple."""
        playlist = Playlist(name="X", slides=[Slide(text="A")])  # type: ignore[arg-type]
        assert playlist.slides == (Slide(text="A"),)

    def test_is_full(self) -> None:
        """Test the slide ceiling flag."""
        slides = tuple(Slide(text=str(i)) for i in range(MAX_SLIDES))
        assert Playlist(name="Full", slides=slides).is_full
        assert not Playlist(name="Short", slides=slides[:-1]).is_full

    def test_negative_delay_rejected(self) -> None:
        """Test that delay must not be negative."""
        with pytest.raises(ValidationError):
            Playlist(name="X", delay_ms=-1)

    def test_blank_name(self) -> None:
        """Test that whitespace does not count as a name."""
        assert not Playlist(name="   ").has_name


class TestPlaylistSerialization:
    """Test stored record conversion."""

    def test_to_dict(self, sample_playlist: Playlist) -> None:
        """Test the stored layout."""
        data = sample_playlist.to_dict()
        assert data["name"] == "Colors"
        assert data["delay"] == 2500
        assert data["slides"][0]["text"] == "Red"
        assert data["slides"][2] == {"text": "Green", "fontFamily": "Georgia"}

    def test_from_dict_restores_playlist(self, sample_playlist: Playlist) -> None:
        """Test reading back a written record."""
        assert Playlist.from_dict(sample_playlist.to_dict()) == sample_playlist

    def test_from_dict_accepts_bare_strings(self) -> None:
        """Test that string slides become unstyled slides."""
        playlist = Playlist.from_dict({"name": "ABC", "slides": ["A", "B"], "delay": 1000})
        assert playlist.slides == (Slide(text="A"), Slide(text="B"))

    def test_from_dict_skips_junk_slides(self) -> None:
        """Test that non-record slide entries are dropped."""
        playlist = Playlist.from_dict({"name": "Mixed", "slides": ["A", 3, None, {"text": "B"}]})
        assert [s.text for s in playlist.slides] == ["A", "B"]

    @pytest.mark.parametrize("delay", [None, 0, "fast", -10, True])
    def test_from_dict_default_delay(self, delay: object) -> None:
        """Test that a missing or unusable delay falls back to the default."""
        playlist = Playlist.from_dict({"name": "X", "slides": [], "delay": delay})
        assert playlist.delay_ms == DEFAULT_PLAYLIST_DELAY_MS

    def test_from_dict_non_list_slides(self) -> None:
        """Test that a non-list slides value gives no slides."""
        assert Playlist.from_dict({"name": "X", "slides": "oops"}).slides == ()

    def test_from_dict_truncates_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that slides past the ceiling are dropped and reported."""
        raw = {"name": "Long", "slides": [str(i) for i in range(MAX_SLIDES + 1)]}
        with caplog.at_level(logging.WARNING, logger="nittu.models.playlist"):
            playlist = Playlist.from_dict(raw)
        assert playlist.slide_count == MAX_SLIDES
        assert playlist.slides[-1].text == str(MAX_SLIDES - 1)
        assert "keeping the first 30" in caplog.text


class TestSettings:
    """Test the settings record."""

    def test_defaults(self) -> None:
        """Test built-in defaults."""
        settings = Settings()
        assert settings.delay_ms == 1500
        assert settings.font_size == 160
        assert settings.font_color == "#ffffff"
        assert settings.background_color == "#000000"
        assert settings.font_family is FontFamily.SYSTEM

    def test_to_dict(self) -> None:
        """Test the stored layout."""
        assert Settings().to_dict() == {
            "delay": 1500,
            "fontSize": 160,
            "fontColor": "#ffffff",
            "backgroundColor": "#000000",
            "fontFamily": "System",
        }

    def test_from_dict_defaults_invalid_fields(self) -> None:
        """Test that each bad field falls back on its own."""
        settings = Settings.from_dict(
            {"delay": "soon", "fontSize": 200, "fontColor": "nope", "fontFamily": "Courier"}
        )
        assert settings == Settings(font_size=200, font_family=FontFamily.COURIER)

    def test_validate_rejects_bad_values(self) -> None:
        """Test validation of each field."""
        Settings().validate()
        for bad in (
            Settings(delay_ms=-1),
            Settings(font_size=0),
            Settings(font_color="white"),
            Settings(background_color="#12"),
            Settings(font_family="Comic Sans"),  # type: ignore[arg-type]
        ):
            with pytest.raises(ValidationError):
                bad.validate()
