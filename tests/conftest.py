"""
Pytest configuration and fixtures for font directory tests.
"""

import os
import tempfile
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

from src.font_directory.core.config import DirectoryConfig
from src.font_directory.directory.schema import Directory

BASE_URL = "http://fonts.example.com/s/f/directory"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep FONTS_ settings from the developer environment out of tests."""
    for key in list(os.environ):
        if key.startswith("FONTS_"):
            monkeypatch.delenv(key)


@pytest.fixture
def config():
    """Directory configuration pointing at a fake host."""
    return DirectoryConfig(_env_file=None, base_url=BASE_URL, show_progress=False)


@pytest.fixture
def temp_dir():
    """Create temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def make_response():
    """Factory for mocked requests responses."""

    def _make(status_code=200, content=b"", headers=None, chunk_error=None):
        response = Mock(spec=requests.Response)
        response.status_code = status_code
        response.headers = headers if headers is not None else {"content-length": str(len(content))}

        def iter_content(chunk_size=1):
            for start in range(0, len(content), chunk_size):
                yield content[start : start + chunk_size]
            if chunk_error is not None:
                raise chunk_error

        response.iter_content.side_effect = iter_content
        return response

    return _make


@pytest.fixture
def versioned_session(make_response):
    """Factory for a session serving the given directory versions.

    ``outcomes`` maps a version to an HTTP status code or an exception; any
    other version answers 404.
    """

    def _make(existing=(), outcomes=None, payload=b""):
        outcomes = dict(outcomes or {})
        for version in existing:
            outcomes.setdefault(version, 200)

        def respond(url):
            version = int(url.removeprefix(BASE_URL).removesuffix(".pb"))
            outcome = outcomes.get(version, 404)
            if isinstance(outcome, Exception):
                raise outcome
            return make_response(outcome, payload if outcome == 200 else b"")

        session = Mock(spec=requests.Session)
        session.request.side_effect = lambda method, url, **kwargs: respond(url)
        session.get.side_effect = lambda url, **kwargs: respond(url)
        return session

    return _make


def build_font(weight=400, italic=None, file_hash=b"\xab", with_weight=True, with_file=True):
    font = {}
    if with_weight:
        font["weight"] = {"start": weight}
    if italic is not None:
        font["italic"] = {"start": italic}
    if with_file:
        font["file"] = {"hash": file_hash} if file_hash is not None else {"filename": "x.ttf"}
    return font


@pytest.fixture
def font():
    """Factory for font dicts in directory message layout."""
    return build_font


@pytest.fixture
def directory_bytes():
    """Factory encoding family dicts into a directory payload."""

    def _encode(families) -> bytes:
        directory = Directory()
        for family in families:
            message = directory.family.add()
            if family.get("name") is not None:
                message.name = family["name"]
            for font in family.get("fonts", []):
                font_message = message.fonts.add()
                if "weight" in font:
                    font_message.weight.start = font["weight"]["start"]
                if "italic" in font:
                    font_message.italic.start = font["italic"]["start"]
                if "file" in font:
                    file_spec = font["file"]
                    if "hash" in file_spec:
                        font_message.file.hash = file_spec["hash"]
                    if "filename" in file_spec:
                        font_message.file.filename = file_spec["filename"]
        return directory.SerializeToString()

    return _encode


@pytest.fixture
def sample_payload(directory_bytes):
    """Directory with a regular family and an italic-capable family."""
    return directory_bytes(
        [
            {
                "name": "Roboto",
                "fonts": [
                    build_font(400, file_hash=b"\x00\xff\x1a"),
                    build_font(700, file_hash=b"\x01\x02"),
                    build_font(400, italic=1.0, file_hash=b"\xca\xfe"),
                ],
            },
            {"name": "Lobster", "fonts": [build_font(400, file_hash=b"\xab")]},
        ]
    )
