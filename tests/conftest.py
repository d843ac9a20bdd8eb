"""Pytest fixtures for encodex tests."""
import pytest

from encodex.core import Base, Settings


@pytest.fixture
def encode_settings():
    """Settings for Base64 encoding."""
    return Settings.for_encoding(Base.BASE64)


@pytest.fixture
def decode_settings():
    """Settings for Base64 decoding."""
    return Settings.for_decoding(Base.BASE64)


@pytest.fixture
def url_encode_settings():
    """Settings for Base64url encoding."""
    return Settings.for_encoding(Base.BASE64URL)


@pytest.fixture
def url_decode_settings():
    """Settings for Base64url decoding."""
    return Settings.for_decoding(Base.BASE64URL)


@pytest.fixture
def rfc4648_vectors():
    """Returns the Base64 test vectors from RFC 4648, section 10."""
    return [
        (b"", b""),
        (b"f", b"Zg=="),
        (b"fo", b"Zm8="),
        (b"foo", b"Zm9v"),
        (b"foob", b"Zm9vYg=="),
        (b"fooba", b"Zm9vYmE="),
        (b"foobar", b"Zm9vYmFy"),
    ]


@pytest.fixture
def input_dir(tmp_path):
    """Creates a working directory with a few input files."""
    (tmp_path / "plain.txt").write_bytes(b"foobar")
    (tmp_path / "encoded.txt").write_bytes(b"Zm9vYmFy")
    (tmp_path / "binary.bin").write_bytes(bytes(range(256)))
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "nested.txt").write_bytes(b"nested")
    return tmp_path
