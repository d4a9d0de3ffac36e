"""Tests for the SecRule aggregate."""

import pytest

from secrules import (
    Action,
    ActionList,
    ActionType,
    Input,
    InputList,
    InputType,
    InvalidSelectorError,
    NodeKind,
    Operator,
    OperatorType,
    RuleParseError,
    RuleSyntaxError,
    SecRule,
    Selector,
    UnexpectedNodeError,
    UnknownActionError,
    UnknownInputError,
    UnknownOperatorError,
    parse_tree,
)
from secrules.errors import MissingNodeError

RULE = (
    'SecRule REQUEST_HEADERS:User-Agent|!REQUEST_HEADERS:Referer|&ARGS "@rx nikto" '
    "\"id:913100,phase:2,block,t:none,msg:'Found User-Agent associated with security scanner'\""
)


class TestSecRuleDeserialize:
    def test_full_rule(self):
        rule = SecRule.parse(RULE)
        assert rule.inputs == InputList(
            [
                Input(InputType.REQUEST_HEADERS, Selector.include("User-Agent")),
                Input(InputType.REQUEST_HEADERS, Selector.exclude("Referer")),
                Input(InputType.ARGS, Selector.count_all()),
            ]
        )
        assert rule.operator == Operator(OperatorType.RX, "nikto")
        assert rule.actions[0] == Action(ActionType.ID, "913100")
        assert rule.actions[-1] == Action(
            ActionType.MSG, "Found User-Agent associated with security scanner"
        )
        assert rule.id == "913100"

    def test_rule_without_id(self):
        rule = SecRule.parse('SecRule ARGS "@rx x" "deny"')
        assert rule.id is None

    def test_leading_and_trailing_whitespace(self):
        rule = SecRule.parse('  SecRule ARGS "@rx x" "deny"  ')
        assert str(rule) == 'SecRule ARGS "@rx x" "deny"'

    def test_round_trip(self):
        rule = SecRule.parse(RULE)
        assert str(rule) == RULE
        assert SecRule.parse(str(rule)) == rule

    def test_hashable(self):
        assert hash(SecRule.parse(RULE)) == hash(SecRule.parse(RULE))

    def test_syntax_error(self):
        with pytest.raises(RuleSyntaxError) as exc_info:
            SecRule.parse('SecRule ARGS "@rx x"')
        assert exc_info.value.text == 'SecRule ARGS "@rx x"'

    def test_wrong_node_kind_is_not_wrapped(self):
        with pytest.raises(UnexpectedNodeError) as exc_info:
            SecRule.deserialize(parse_tree("ARGS", NodeKind.INPUTS))
        assert exc_info.value.kind is NodeKind.INPUTS


class TestSecRuleErrorAttribution:
    def test_operator_failure(self):
        with pytest.raises(RuleParseError) as exc_info:
            SecRule.parse('SecRule ARGS "@bogus x" "id:1,deny"')
        error = exc_info.value
        assert error.component == "operator"
        assert isinstance(error.error, UnknownOperatorError)
        assert error.__cause__ is error.error
        assert "@bogus" in str(error)

    def test_input_failure(self):
        with pytest.raises(RuleParseError) as exc_info:
            SecRule.parse('SecRule ARGS|NOPE "@rx x" "id:1"')
        assert exc_info.value.component == "inputs"
        assert isinstance(exc_info.value.error, UnknownInputError)

    def test_selector_failure(self):
        with pytest.raises(RuleParseError) as exc_info:
            SecRule.parse('SecRule !TX "@rx x" "id:1"')
        assert exc_info.value.component == "inputs"
        assert isinstance(exc_info.value.error, InvalidSelectorError)
        assert exc_info.value.error.text == "!TX"

    def test_action_failure(self):
        with pytest.raises(RuleParseError) as exc_info:
            SecRule.parse('SecRule ARGS "@rx x" "id:1,explode"')
        assert exc_info.value.component == "actions"
        assert isinstance(exc_info.value.error, UnknownActionError)

    def test_first_failure_wins(self):
        with pytest.raises(RuleParseError) as exc_info:
            SecRule.parse('SecRule NOPE "@bogus x" "explode"')
        assert exc_info.value.component == "inputs"

    def test_missing_child(self, make_node):
        tree = make_node(
            NodeKind.SEC_RULE,
            "SecRule ARGS",
            make_node(
                NodeKind.INPUTS,
                "ARGS",
                make_node(
                    NodeKind.INPUT, "ARGS", make_node(NodeKind.INPUT_NAME, "ARGS")
                ),
            ),
        )
        with pytest.raises(RuleParseError) as exc_info:
            SecRule.deserialize(tree)
        assert exc_info.value.component == "operator"
        assert isinstance(exc_info.value.error, MissingNodeError)

    def test_empty_selector_from_external_tree(self, make_node):
        tree = make_node(
            NodeKind.SEC_RULE,
            'SecRule !TX: "@rx x" "id:1"',
            make_node(
                NodeKind.INPUTS,
                "!TX:",
                make_node(
                    NodeKind.INPUT,
                    "!TX:",
                    make_node(NodeKind.INPUT_MODIFIER, "!"),
                    make_node(NodeKind.INPUT_NAME, "TX"),
                    make_node(NodeKind.SELECTOR, ""),
                ),
            ),
        )
        with pytest.raises(RuleParseError) as exc_info:
            SecRule.deserialize(tree)
        assert exc_info.value.component == "inputs"
        assert isinstance(exc_info.value.error, InvalidSelectorError)
        assert exc_info.value.error.text == "!TX:"

    def test_children_out_of_order(self, make_node):
        tree = make_node(
            NodeKind.SEC_RULE,
            'SecRule "deny"',
            make_node(NodeKind.ACTIONS, '"deny"'),
        )
        with pytest.raises(RuleParseError) as exc_info:
            SecRule.deserialize(tree)
        assert exc_info.value.component == "inputs"
        assert isinstance(exc_info.value.error, UnexpectedNodeError)


class TestSecRuleSerialize:
    def test_constructed(self):
        rule = SecRule(
            inputs=InputList([Input(InputType.ARGS_GET), Input(InputType.FILES, Selector.count_all())]),
            operator=Operator(OperatorType.GT, "0"),
            actions=ActionList([Action(ActionType.ID, "1"), Action(ActionType.DENY)]),
        )
        assert str(rule) == 'SecRule ARGS_GET|&FILES "@gt 0" "id:1,deny"'
        assert SecRule.parse(str(rule)) == rule

    def test_canonicalizes(self):
        rule = SecRule.parse("SecRule\tARGS   \"foo\"  \"id:2 , msg:'x'\"")
        assert str(rule) == 'SecRule ARGS "@rx foo" "id:2,msg:x"'
