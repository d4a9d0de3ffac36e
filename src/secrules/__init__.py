"""ModSecurity SecRule parsing and canonical rendering."""

from .actions import Action, ActionList
from .errors import (
    ActionParseError,
    DirectiveError,
    InputParseError,
    InvalidModifierError,
    InvalidSelectorError,
    MissingNodeError,
    OperatorParseError,
    RuleParseError,
    RuleSyntaxError,
    SecRuleError,
    UnexpectedNodeError,
    UnknownActionError,
    UnknownInputError,
    UnknownOperatorError,
)
from .grammar import GRAMMAR, NodeKind, ParseNode, parse_tree
from .inputs import Input, InputList, Selector, SelectorKind
from .operator import Operator
from .rule import SecRule
from .ruleset import dump_rules, iter_directives, parse_rules, validate_rules
from .tokens import ActionType, InputType, OperatorType, SelectorType, Token

__all__ = [
    # Vocabularies
    "Token",
    "InputType",
    "SelectorType",
    "OperatorType",
    "ActionType",
    # Parse tree
    "GRAMMAR",
    "NodeKind",
    "ParseNode",
    "parse_tree",
    # Models
    "Selector",
    "SelectorKind",
    "Input",
    "InputList",
    "Operator",
    "Action",
    "ActionList",
    "SecRule",
    # Rule blocks
    "iter_directives",
    "parse_rules",
    "validate_rules",
    "dump_rules",
    # Errors
    "SecRuleError",
    "RuleSyntaxError",
    "UnexpectedNodeError",
    "MissingNodeError",
    "InputParseError",
    "UnknownInputError",
    "InvalidSelectorError",
    "InvalidModifierError",
    "OperatorParseError",
    "UnknownOperatorError",
    "ActionParseError",
    "UnknownActionError",
    "RuleParseError",
    "DirectiveError",
]
