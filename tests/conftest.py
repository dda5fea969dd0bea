"""Shared fixtures for rawlatex tests."""

from collections.abc import Callable, Iterator

import pytest
from markdown_it import MarkdownIt
from markdown_it.token import Token

from rawlatex import create_markdown
from rawlatex.config import reset_math_config
from rawlatex.tokens import ALL_TOKEN_TYPES


def _walk(tokens: list[Token]) -> Iterator[Token]:
    for token in tokens:
        yield token
        if token.children:
            yield from _walk(token.children)


@pytest.fixture
def md() -> MarkdownIt:
    """Commonmark parser with all math rules enabled."""
    return create_markdown()


@pytest.fixture
def math_tokens(md: MarkdownIt) -> Callable[[str], list[Token]]:
    """Parse source and return every math token, block and inline, in order."""

    def collect(source: str) -> list[Token]:
        return [t for t in _walk(md.parse(source)) if t.type in ALL_TOKEN_TYPES]

    return collect


@pytest.fixture(autouse=True)
def _reset_config() -> Iterator[None]:
    yield
    reset_math_config()
