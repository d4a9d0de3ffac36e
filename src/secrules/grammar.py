"""SecRule grammar and the kind-tagged parse tree the models consume.

Uses parsimonious for PEG parsing. Only rules listed in NodeKind show up in
the tree handed to the models; every other rule is silent and its kinded
descendants are lifted into the nearest kinded ancestor.
"""

import logging
from dataclasses import dataclass
from enum import unique

from parsimonious.exceptions import ParseError
from parsimonious.grammar import Grammar
from parsimonious.nodes import NodeVisitor

from .errors import MissingNodeError, RuleSyntaxError, UnexpectedNodeError
from .tokens import Token

logger = logging.getLogger(__name__)

# =============================================================================
# PEG Grammar
# =============================================================================

GRAMMAR = Grammar(r"""
sec_rule          = ws* "SecRule" ws+ inputs ws+ operator ws+ actions ws*
ws                = " " / "\t"

inputs            = input ("|" input)*
input             = input_modifier? input_name (":" selector)?
input_modifier    = "!" / "&"
input_name        = ~"[A-Za-z][A-Za-z0-9_]*"
selector          = ~"[^|\\s]+"

operator          = "\"" operator_negation? operator_body "\""
operator_body     = named_operator / implicit_operator
named_operator    = operator_name (ws+ operator_argument)?
implicit_operator = &~"[^\\s@!]" operator_argument
operator_negation = "!"
operator_name     = ~"@[A-Za-z0-9]+"
operator_argument = ~"(?:[^\"\\\\]|\\\\.)*"

actions           = "\"" ws* action_list? ws* "\""
action_list       = action (ws* "," ws* action)*
action            = action_name (":" action_argument)?
action_name       = ~"[A-Za-z]+"
action_argument   = ~"'(?:[^'\\\\]|\\\\.)*'" / ~"[^,'\"\\s]+"
""")


@unique
class NodeKind(Token):
    """Grammar rules that appear as nodes in the parse tree."""

    SEC_RULE = "sec_rule"
    INPUTS = "inputs"
    INPUT = "input"
    INPUT_MODIFIER = "input_modifier"
    INPUT_NAME = "input_name"
    SELECTOR = "selector"
    OPERATOR = "operator"
    OPERATOR_NEGATION = "operator_negation"
    OPERATOR_NAME = "operator_name"
    OPERATOR_ARGUMENT = "operator_argument"
    ACTIONS = "actions"
    ACTION = "action"
    ACTION_NAME = "action_name"
    ACTION_ARGUMENT = "action_argument"


@dataclass(frozen=True)
class ParseNode:
    """A kinded node: its matched text and its kinded children in order."""

    kind: NodeKind
    text: str
    children: tuple = ()
    start: int = 0


class Children:
    """Cursor over a node's children, consumed in grammar order."""

    def __init__(self, node: ParseNode):
        self._node = node
        self._pos = 0

    def peek(self) -> ParseNode | None:
        if self._pos < len(self._node.children):
            return self._node.children[self._pos]
        return None

    def next_if(self, kind: NodeKind) -> ParseNode | None:
        """Consume the next child only if it is of ``kind``."""
        child = self.peek()
        if child is None or child.kind is not kind:
            return None
        self._pos += 1
        return child

    def next(self, kind: NodeKind | None = None) -> ParseNode:
        """Consume the next child, which must exist (and match ``kind`` if given)."""
        child = self.peek()
        if child is None:
            raise MissingNodeError(kind, self._node.text)
        if kind is not None and child.kind is not kind:
            raise UnexpectedNodeError(child.kind, kind)
        self._pos += 1
        return child

    def __iter__(self):
        while (child := self.peek()) is not None:
            self._pos += 1
            yield child


# =============================================================================
# Tree builder - prunes the parsimonious tree down to kinded nodes
# =============================================================================


class TreeBuilder(NodeVisitor):
    """Visits a parsimonious tree and returns a list of ParseNode roots."""

    def generic_visit(self, node, visited_children):
        children = [child for visited in visited_children for child in visited]
        kind = NodeKind.from_text(node.expr_name)
        if kind is None:
            return children
        return [ParseNode(kind, node.text, tuple(children), node.start)]


def parse_tree(text: str, kind: NodeKind = NodeKind.SEC_RULE) -> ParseNode:
    """Parse ``text`` as the grammar rule named by ``kind``.

    Raises:
        RuleSyntaxError: if the grammar rejects the text.
    """
    try:
        tree = GRAMMAR[kind.text].parse(text)
    except ParseError as e:
        logger.debug("Grammar rejected %s %r: %s", kind.text, text, e)
        raise RuleSyntaxError(text, str(e)) from e
    (root,) = TreeBuilder().visit(tree)
    return root
