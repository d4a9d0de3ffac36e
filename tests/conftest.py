"""Shared test fixtures."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from secrules.grammar import NodeKind, ParseNode


def node(kind: NodeKind, text: str, *children: ParseNode) -> ParseNode:
    """Build a ParseNode by hand, bypassing the grammar."""
    return ParseNode(kind, text, tuple(children))


@pytest.fixture
def make_node():
    return node
