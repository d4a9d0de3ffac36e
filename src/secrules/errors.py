"""Exception hierarchy for rule parsing.

Every error keeps enough of the original text to find the offending
directive without re-running at a higher verbosity.
"""


class SecRuleError(Exception):
    """Base class for all rule parsing errors."""


class RuleSyntaxError(SecRuleError):
    """The grammar rejected the text."""

    def __init__(self, text: str, message: str):
        self.text = text
        self.message = message
        super().__init__(f"invalid syntax in {text!r}: {message}")


class UnexpectedNodeError(SecRuleError):
    """An adapter was handed a parse-tree node of the wrong kind."""

    def __init__(self, kind, expected):
        self.kind = kind
        self.expected = expected
        super().__init__(f"invalid rule {kind.text!r} (expected {expected.text!r})")


class MissingNodeError(SecRuleError):
    """A mandatory child node was absent."""

    def __init__(self, expected, text: str):
        self.expected = expected
        self.text = text
        what = repr(expected.text) if expected is not None else "node"
        super().__init__(f"missing {what} in {text!r}")


class InputParseError(SecRuleError):
    """Base class for input reference errors."""


class UnknownInputError(InputParseError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown input {name}")


class InvalidSelectorError(InputParseError):
    """Modifier and key do not form a legal selector (e.g. ``!TX``)."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"invalid input selector {text}")


class InvalidModifierError(InputParseError):
    def __init__(self, modifier: str, text: str):
        self.modifier = modifier
        self.text = text
        super().__init__(f"invalid input modifier {modifier!r} in {text}")


class OperatorParseError(SecRuleError):
    """Base class for operator errors."""


class UnknownOperatorError(OperatorParseError):
    def __init__(self, name: str, text: str):
        self.name = name
        self.text = text
        super().__init__(f"unknown operator @{name} in {text}")


class ActionParseError(SecRuleError):
    """Base class for action errors."""


class UnknownActionError(ActionParseError):
    def __init__(self, name: str, text: str):
        self.name = name
        self.text = text
        super().__init__(f"unknown action {name} in {text}")


class RuleParseError(SecRuleError):
    """A child of a SecRule failed to deserialize.

    Attributes:
        component: Which child failed: "inputs", "operator" or "actions".
        error: The child's own exception, also chained as __cause__.
    """

    def __init__(self, component: str, error: SecRuleError):
        self.component = component
        self.error = error
        super().__init__(f"invalid {component}: {error}")


class DirectiveError(SecRuleError):
    """A directive in a block of rule text failed to parse."""

    def __init__(self, line_num: int, text: str, error: SecRuleError):
        self.line_num = line_num
        self.text = text
        self.error = error
        super().__init__(f"line {line_num}: {error}")
