"""Match operator of a rule: ``"@rx ^foo"``, ``"!@streq bar"`` or ``"foo"``.

A quoted string without ``@`` is the implicit ``@rx`` and is always written
back in its explicit form. The argument is kept as written, escapes and all.
"""

from dataclasses import dataclass

from .adapter import Adapter
from .errors import UnknownOperatorError
from .grammar import Children, NodeKind, ParseNode
from .tokens import OperatorType


@dataclass(frozen=True)
class Operator(Adapter):
    KIND = NodeKind.OPERATOR

    operator: OperatorType
    argument: str = ""
    negated: bool = False

    @classmethod
    def deserialize(cls, node: ParseNode) -> "Operator":
        cls.claim(node)

        children = Children(node)
        negated = children.next_if(NodeKind.OPERATOR_NEGATION) is not None

        name = children.next_if(NodeKind.OPERATOR_NAME)
        if name is None:
            operator = OperatorType.RX
        else:
            operator = OperatorType.from_text(name.text[1:])
            if operator is None:
                raise UnknownOperatorError(name.text[1:], node.text)

        argument = children.next_if(NodeKind.OPERATOR_ARGUMENT)
        return cls(
            operator=operator,
            argument=argument.text if argument is not None else "",
            negated=negated,
        )

    def serialize(self, out) -> None:
        out.write('"')
        if self.negated:
            out.write("!")
        out.write("@")
        out.write(self.operator.text)
        if self.argument:
            out.write(" ")
            out.write(self.argument)
        out.write('"')
