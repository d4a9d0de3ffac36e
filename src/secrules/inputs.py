"""Input references: a variable plus an optional selector.

    ARGS                      Input(ARGS, Selector.none())
    REQUEST_HEADERS:Host      Input(REQUEST_HEADERS, Selector.include("Host"))
    !ARGS:password            Input(ARGS, Selector.exclude("password"))
    &ARGS:id                  Input(ARGS, Selector.count("id"))
    &TX                       Input(TX, Selector.count_all())
"""

from dataclasses import dataclass
from enum import Enum

from .adapter import Adapter
from .errors import (
    InvalidModifierError,
    InvalidSelectorError,
    UnknownInputError,
)
from .grammar import Children, NodeKind, ParseNode
from .tokens import InputType, SelectorType


class SelectorKind(Enum):
    NONE = "none"
    INCLUDE = "include"
    EXCLUDE = "exclude"
    COUNT = "count"
    COUNT_ALL = "count_all"


_KEYED = (SelectorKind.INCLUDE, SelectorKind.EXCLUDE, SelectorKind.COUNT)

_SELECTOR_TYPES = {
    SelectorKind.NONE: None,
    SelectorKind.INCLUDE: SelectorType.INCLUDE,
    SelectorKind.EXCLUDE: SelectorType.EXCLUDE,
    SelectorKind.COUNT: SelectorType.COUNT,
    SelectorKind.COUNT_ALL: SelectorType.COUNT,
}


@dataclass(frozen=True)
class Selector:
    """Collection-narrowing part of an input reference.

    INCLUDE, EXCLUDE and COUNT always carry a non-empty key; NONE and
    COUNT_ALL never do.
    """

    kind: SelectorKind = SelectorKind.NONE
    key: str | None = None

    def __post_init__(self):
        if self.kind in _KEYED:
            if not self.key:
                raise ValueError(f"{self.kind.value} selector requires a key")
        elif self.key is not None:
            raise ValueError(f"{self.kind.value} selector takes no key")

    @classmethod
    def none(cls) -> "Selector":
        return cls()

    @classmethod
    def include(cls, key: str) -> "Selector":
        return cls(SelectorKind.INCLUDE, key)

    @classmethod
    def exclude(cls, key: str) -> "Selector":
        return cls(SelectorKind.EXCLUDE, key)

    @classmethod
    def count(cls, key: str) -> "Selector":
        return cls(SelectorKind.COUNT, key)

    @classmethod
    def count_all(cls) -> "Selector":
        return cls(SelectorKind.COUNT_ALL)

    @classmethod
    def from_parts(
        cls,
        modifier: str | None,
        key: str | None,
        text: str,
    ) -> "Selector":
        """Resolve an optional modifier and optional key into a Selector.

        Args:
            modifier: Modifier text ("!" or "&"), or None when absent.
            key: Selector key, or None when absent.
            text: The whole input reference, used in error messages.

        Raises:
            InvalidModifierError: ``modifier`` is not "!" or "&". The include
                modifier is implied by a bare key and is never written.
            InvalidSelectorError: "!" without a key, or an empty key.
        """
        selector_type = None
        if modifier is not None:
            selector_type = SelectorType.from_text(modifier)
            if selector_type not in (SelectorType.EXCLUDE, SelectorType.COUNT):
                raise InvalidModifierError(modifier, text)
        if key == "":
            raise InvalidSelectorError(text)

        if selector_type is None:
            return cls.none() if key is None else cls.include(key)
        if selector_type is SelectorType.EXCLUDE:
            if key is None:
                raise InvalidSelectorError(text)
            return cls.exclude(key)
        return cls.count_all() if key is None else cls.count(key)

    @property
    def arg(self) -> str | None:
        """The selector key, if this variant carries one."""
        return self.key

    @property
    def selector_type(self) -> SelectorType | None:
        """Modifier symbol for this selector; COUNT and COUNT_ALL share "&"."""
        return _SELECTOR_TYPES[self.kind]

    @property
    def prefix_text(self) -> str:
        selector_type = self.selector_type
        return selector_type.text if selector_type is not None else ""


@dataclass(frozen=True)
class Input(Adapter):
    """One variable reference in a rule's target list."""

    KIND = NodeKind.INPUT

    input: InputType
    selector: Selector = Selector()

    @classmethod
    def deserialize(cls, node: ParseNode) -> "Input":
        cls.claim(node)

        text = node.text
        children = Children(node)

        modifier = children.next_if(NodeKind.INPUT_MODIFIER)
        name = children.next(NodeKind.INPUT_NAME).text
        input_type = InputType.from_text(name)
        if input_type is None:
            raise UnknownInputError(name)

        key = children.next_if(NodeKind.SELECTOR)
        selector = Selector.from_parts(
            modifier.text if modifier is not None else None,
            key.text if key is not None else None,
            text,
        )
        return cls(input=input_type, selector=selector)

    def serialize(self, out) -> None:
        out.write(self.selector.prefix_text)
        out.write(self.input.text)
        if self.selector.arg is not None:
            out.write(":")
            out.write(self.selector.arg)


class InputList(Adapter, tuple):
    """Ordered inputs of a rule, written ``A|B:key|&C``."""

    KIND = NodeKind.INPUTS
    SEPARATOR = "|"

    def __new__(cls, inputs=()):
        return super().__new__(cls, inputs)

    @classmethod
    def deserialize(cls, node: ParseNode) -> "InputList":
        cls.claim(node)
        return cls(Input.deserialize(child) for child in Children(node))

    def serialize(self, out) -> None:
        for i, item in enumerate(self):
            if i:
                out.write(self.SEPARATOR)
            item.serialize(out)

    def __repr__(self) -> str:
        return f"InputList({list(self)!r})"
