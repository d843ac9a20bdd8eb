"""Tests for translation settings."""
import dataclasses

import pytest

from encodex.core.settings import Base, EncodeMode, Settings


class TestBase:
    """Test suite for Base enum."""

    def test_values(self):
        """Test display names of all variants."""
        assert [base.value for base in Base] == [
            "Base64", "Base64url", "Base32", "Base32hex", "Base16", "Guess"
        ]

    def test_str(self):
        """Test str returns the display name."""
        assert str(Base.BASE64URL) == "Base64url"


class TestSettings:
    """Test suite for Settings."""

    def test_defaults(self):
        """Test default settings."""
        settings = Settings.default()

        assert settings.base is Base.BASE64
        assert settings.encode_mode is EncodeMode.ENCODE

    def test_factories(self):
        """Test classmethod constructors."""
        assert Settings.for_encoding(Base.BASE64URL) == Settings(Base.BASE64URL, EncodeMode.ENCODE)
        assert Settings.for_decoding().encode_mode is EncodeMode.DECODE
        assert Settings.for_decoding().base is Base.BASE64

    def test_frozen(self):
        """Test settings can't be mutated."""
        settings = Settings.default()

        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.encode_mode = EncodeMode.DECODE

    def test_rejects_wrong_types(self):
        """Test settings validate their field types."""
        with pytest.raises(TypeError):
            Settings(base="Base64")
        with pytest.raises(TypeError):
            Settings(encode_mode="decode")

    def test_hashable(self):
        """Test settings can be used as dict keys."""
        assert len({Settings.default(), Settings.default()}) == 1
