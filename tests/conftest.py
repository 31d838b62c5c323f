"""Shared test fixtures for post-office tests."""

from __future__ import annotations

from typing import Callable

import pytest

from post_office.model.expression import Node
from post_office.parser import parse_expression


@pytest.fixture
def root() -> Callable[[str], Node]:
    """Parse an expression and return its root node."""

    def _root(text: str) -> Node:
        return parse_expression(text).root

    return _root
