"""The SecRule directive: inputs, one operator and a list of actions."""

import logging
from dataclasses import dataclass

from .actions import ActionList
from .adapter import Adapter
from .errors import RuleParseError, SecRuleError
from .grammar import Children, NodeKind, ParseNode
from .inputs import InputList
from .operator import Operator
from .tokens import ActionType

logger = logging.getLogger(__name__)

DIRECTIVE = "SecRule"


@dataclass(frozen=True)
class SecRule(Adapter):
    """A fully parsed rule. Never built from a partially valid directive."""

    KIND = NodeKind.SEC_RULE

    inputs: InputList
    operator: Operator
    actions: ActionList

    @classmethod
    def deserialize(cls, node: ParseNode) -> "SecRule":
        cls.claim(node)

        children = Children(node)
        inputs = _deserialize_child("inputs", InputList, children)
        operator = _deserialize_child("operator", Operator, children)
        actions = _deserialize_child("actions", ActionList, children)

        return cls(inputs=inputs, operator=operator, actions=actions)

    def serialize(self, out) -> None:
        out.write(DIRECTIVE)
        out.write(" ")
        self.inputs.serialize(out)
        out.write(" ")
        self.operator.serialize(out)
        out.write(" ")
        self.actions.serialize(out)

    @property
    def id(self) -> str | None:
        """Value of the ``id`` action, if the rule has one."""
        action = self.actions.get(ActionType.ID)
        return action.argument if action is not None else None


def _deserialize_child(component: str, adapter: type[Adapter], children: Children):
    """Deserialize the next child, tagging any failure with ``component``."""
    try:
        return adapter.deserialize(children.next(adapter.KIND))
    except SecRuleError as e:
        logger.debug("SecRule %s failed: %s", component, e)
        raise RuleParseError(component, e) from e
