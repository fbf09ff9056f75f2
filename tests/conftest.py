"""Shared fixtures: build small source trees under tmp_path."""

import pytest


def _padded(text: str, tokens: int) -> str:
    filler = tokens * 4 - len(text) - 3
    assert filler >= 0, "text is longer than the requested size"
    return text + "\n//" + "x" * filler


@pytest.fixture
def padded():
    """Pad source text with a line comment to exactly tokens * 4 characters."""
    return _padded


@pytest.fixture
def source_tree(tmp_path):
    """Write {relative_path: content} under tmp_path and return the root."""
    def write(files):
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path
    return write
