"""Rule actions: ``"id:1000,phase:2,deny,msg:'Bad, very bad'"``."""

import re
from dataclasses import dataclass

from .adapter import Adapter
from .errors import UnknownActionError
from .grammar import Children, NodeKind, ParseNode
from .tokens import ActionType

# Arguments matching this are written bare, everything else single-quoted.
_BARE_ARGUMENT = re.compile(r"[^,'\"\s]+")


@dataclass(frozen=True)
class Action(Adapter):
    """A single action with its optional argument (quotes removed)."""

    KIND = NodeKind.ACTION

    action: ActionType
    argument: str | None = None

    @classmethod
    def deserialize(cls, node: ParseNode) -> "Action":
        cls.claim(node)

        children = Children(node)
        name = children.next(NodeKind.ACTION_NAME).text
        action = ActionType.from_text(name)
        if action is None:
            raise UnknownActionError(name, node.text)

        argument = children.next_if(NodeKind.ACTION_ARGUMENT)
        if argument is None:
            return cls(action=action)

        value = argument.text
        if value.startswith("'"):
            value = value[1:-1]
        return cls(action=action, argument=value)

    def serialize(self, out) -> None:
        out.write(self.action.text)
        if self.argument is None:
            return
        out.write(":")
        if _BARE_ARGUMENT.fullmatch(self.argument):
            out.write(self.argument)
        else:
            out.write(f"'{self.argument}'")


class ActionList(Adapter, tuple):
    """Ordered actions of a rule; they run left to right."""

    KIND = NodeKind.ACTIONS
    SEPARATOR = ","

    def __new__(cls, actions=()):
        return super().__new__(cls, actions)

    @classmethod
    def deserialize(cls, node: ParseNode) -> "ActionList":
        cls.claim(node)
        return cls(Action.deserialize(child) for child in Children(node))

    def serialize(self, out) -> None:
        out.write('"')
        for i, action in enumerate(self):
            if i:
                out.write(self.SEPARATOR)
            action.serialize(out)
        out.write('"')

    def get(self, action_type: ActionType) -> Action | None:
        """First action of ``action_type``, or None."""
        for action in self:
            if action.action is action_type:
                return action
        return None

    def __repr__(self) -> str:
        return f"ActionList({list(self)!r})"
