"""Shared contract between parse-tree nodes and the typed rule models."""

import io

from .errors import UnexpectedNodeError
from .grammar import NodeKind, ParseNode, parse_tree


class Adapter:
    """A model built from exactly one kind of parse-tree node.

    Subclasses set KIND, implement deserialize() and serialize(), and get
    claim(), parse() and str() for free.
    """

    KIND: NodeKind

    @classmethod
    def claim(cls, node: ParseNode) -> None:
        """Raise UnexpectedNodeError unless ``node`` is of this adapter's kind."""
        if node.kind is not cls.KIND:
            raise UnexpectedNodeError(node.kind, cls.KIND)

    @classmethod
    def deserialize(cls, node: ParseNode):
        raise NotImplementedError

    @classmethod
    def parse(cls, text: str):
        """Parse ``text`` with the grammar rule for KIND and deserialize it."""
        return cls.deserialize(parse_tree(text, cls.KIND))

    def serialize(self, out) -> None:
        """Write the canonical text form to ``out`` (anything with write())."""
        raise NotImplementedError

    def __str__(self) -> str:
        buf = io.StringIO()
        self.serialize(buf)
        return buf.getvalue()

