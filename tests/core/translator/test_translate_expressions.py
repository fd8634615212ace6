"""
Tests for expression lowering.

Verifies:
1. Identifier and literal round-trips (null/undefined never become strings).
2. Assignment parenthesization by context, including the property-write asymmetry.
3. Calls, instantiation and the pure-call annotation.
4. Conditional associativity grouping.
5. Compile-time-only wrappers (cast, non-null assertion) vanish.
6. Aggregates, typeof, negation and operators.
7. Wrapped output nodes pass through and report identifier usage.
"""

from unittest.mock import MagicMock

import pytest

from ir_lowering.core.imports import DefaultImportRecorder, ImportManager, NoopDefaultImportRecorder
from ir_lowering.core.js.nodes import (
  BinaryExpression,
  CommentKind,
  ConditionalExpression,
  Identifier,
  NullLiteral,
  NumericLiteral,
  ParenthesizedExpression,
  StringLiteral,
)
from ir_lowering.core.translator import translate_expression, translate_statement
from ir_lowering.core.translator.errors import UnsupportedExpressionError, UnsupportedOperatorError
from ir_lowering.enums import BinaryOperator, ScriptTarget, UnaryOperator
from ir_lowering.ir import (
  UNDEFINED,
  AssertNotNull,
  BinaryOperatorExpr,
  CastExpr,
  CommaExpr,
  ConditionalExpr,
  ExpressionStatement,
  FnParam,
  FunctionExpr,
  IfStmt,
  InstantiateExpr,
  InvokeFunctionExpr,
  InvokeMethodExpr,
  LiteralArrayExpr,
  LiteralExpr,
  LiteralMapEntry,
  LiteralMapExpr,
  NotExpr,
  ReadKeyExpr,
  ReadPropExpr,
  ReadVarExpr,
  ReturnStatement,
  TypeofExpr,
  UnaryOperatorExpr,
  WrappedNodeExpr,
  WriteKeyExpr,
  WritePropExpr,
  WriteVarExpr,
)


def translate(expr, recorder=None):
  return translate_expression(expr, ImportManager(), recorder or NoopDefaultImportRecorder(), ScriptTarget.ES2015)


def render(expr) -> str:
  return translate(expr).to_text()


def render_stmt(expr) -> str:
  return translate_statement(
    ExpressionStatement(expr), ImportManager(), NoopDefaultImportRecorder(), ScriptTarget.ES2015
  ).to_text()


# --- Identifiers and literals ---


@pytest.mark.parametrize("name", ["x", "ctx", "$event", "_t", "i0"])
def test_read_var_round_trip(name):
  node = translate(ReadVarExpr(name))
  assert node == Identifier(name)
  assert node.to_text() == name


def test_null_literal():
  node = translate(LiteralExpr(None))
  assert isinstance(node, NullLiteral)
  assert node.to_text() == "null"


def test_undefined_literal():
  node = translate(LiteralExpr(UNDEFINED))
  assert node == Identifier("undefined")
  assert node.to_text() == "undefined"


def test_default_literal_is_undefined():
  assert render(LiteralExpr()) == "undefined"


@pytest.mark.parametrize(
  "value, text",
  [
    (True, "true"),
    (False, "false"),
    (0, "0"),
    (42, "42"),
    (1.5, "1.5"),
    (2.0, "2"),
    ("hello", '"hello"'),
    ('say "hi"', '"say \\"hi\\""'),
    ("", '""'),
  ],
)
def test_primitive_literals(value, text):
  assert render(LiteralExpr(value)) == text


def test_string_literal_kind():
  assert isinstance(translate(LiteralExpr("null")), StringLiteral)


def test_boolean_is_not_numeric():
  assert not isinstance(translate(LiteralExpr(True)), NumericLiteral)


# --- Writes ---


def test_write_var_in_expression_position_is_parenthesized():
  node = translate(WriteVarExpr("x", LiteralExpr(1)))
  assert isinstance(node, ParenthesizedExpression)
  assert node.to_text() == "(x = 1)"


def test_write_var_in_statement_position_is_bare():
  assert render_stmt(WriteVarExpr("x", LiteralExpr(1))) == "x = 1;"


def test_write_key_in_expression_position_is_parenthesized():
  expr = WriteKeyExpr(ReadVarExpr("a"), LiteralExpr(0), LiteralExpr(1))
  assert render(expr) == "(a[0] = 1)"


def test_write_key_in_statement_position_is_bare():
  expr = WriteKeyExpr(ReadVarExpr("a"), LiteralExpr("k"), ReadVarExpr("v"))
  assert render_stmt(expr) == 'a["k"] = v;'


def test_write_key_children_are_expression_mode():
  """Even at statement level, a nested write inside a keyed write is grouped."""
  expr = WriteKeyExpr(ReadVarExpr("a"), LiteralExpr(0), WriteVarExpr("b", LiteralExpr(1)))
  assert render_stmt(expr) == "a[0] = (b = 1);"


def test_write_var_value_inherits_context():
  """Chained variable writes at statement level stay bare: `a = b = 1`."""
  expr = WriteVarExpr("a", WriteVarExpr("b", LiteralExpr(1)))
  assert render_stmt(expr) == "a = b = 1;"


def test_write_prop_is_never_parenthesized():
  """Property writes are left bare even in expression position, unlike variable and keyed writes."""
  node = translate(WritePropExpr(ReadVarExpr("o"), "p", LiteralExpr(1)))
  assert isinstance(node, BinaryExpression)
  assert node.to_text() == "o.p = 1"


def test_write_prop_inside_call_argument_is_bare():
  expr = InvokeFunctionExpr(ReadVarExpr("f"), [WritePropExpr(ReadVarExpr("o"), "p", LiteralExpr(1))])
  assert render(expr) == "f(o.p = 1)"


def test_write_var_inside_call_argument_is_parenthesized():
  expr = InvokeFunctionExpr(ReadVarExpr("f"), [WriteVarExpr("x", LiteralExpr(1))])
  assert render(expr) == "f((x = 1))"


# --- Calls ---


def test_invoke_method():
  expr = InvokeMethodExpr(ReadVarExpr("ctx"), "onClick", [ReadVarExpr("$event")])
  assert render(expr) == "ctx.onClick($event)"


def test_invoke_method_without_name_calls_receiver():
  expr = InvokeMethodExpr(ReadPropExpr(ReadVarExpr("ctx"), "handler"), None, [LiteralExpr(1)])
  assert render(expr) == "ctx.handler(1)"


def test_invoke_function():
  expr = InvokeFunctionExpr(ReadVarExpr("f"), [LiteralExpr(1), LiteralExpr("a")])
  assert render(expr) == 'f(1, "a")'


def test_pure_invoke_function_gets_annotation():
  node = translate(InvokeFunctionExpr(ReadVarExpr("f"), [], pure=True))
  assert len(node.leading_comments) == 1
  comment = node.leading_comments[0]
  assert comment.kind is CommentKind.MULTI_LINE
  assert comment.text == "@__PURE__"
  assert comment.has_trailing_newline is False
  assert node.to_text() == "/*@__PURE__*/ f()"


def test_impure_invoke_function_has_no_annotation():
  node = translate(InvokeFunctionExpr(ReadVarExpr("f")))
  assert node.leading_comments == []


def test_instantiate():
  expr = InstantiateExpr(ReadVarExpr("Map"), [LiteralArrayExpr()])
  assert render(expr) == "new Map([])"


@pytest.mark.parametrize(
  "class_expr, expected",
  [
    (ReadPropExpr(InvokeMethodExpr(ReadVarExpr("a"), "b"), "c"), "new (a.b().c)()"),
    (ReadKeyExpr(InvokeFunctionExpr(ReadVarExpr("f")), LiteralExpr(0)), "new (f()[0])()"),
    (InvokeFunctionExpr(ReadVarExpr("factory")), "new (factory())()"),
  ],
)
def test_instantiate_groups_call_in_class_expression(class_expr, expected):
  assert render(InstantiateExpr(class_expr)) == expected


# --- Conditionals ---


def test_conditional_simple():
  expr = ConditionalExpr(ReadVarExpr("a"), ReadVarExpr("b"), ReadVarExpr("c"))
  assert render(expr) == "a ? b : c"


def test_conditional_as_condition_is_grouped():
  inner = ConditionalExpr(
    BinaryOperatorExpr(BinaryOperator.EQUALS, ReadVarExpr("a"), LiteralExpr(None)),
    LiteralExpr(None),
    ReadPropExpr(ReadVarExpr("a"), "b"),
  )
  node = translate(ConditionalExpr(inner, ReadVarExpr("c"), ReadVarExpr("d")))
  assert isinstance(node, ConditionalExpression)
  assert isinstance(node.condition, ParenthesizedExpression)
  assert node.to_text() == "(a == null ? null : a.b) ? c : d"


@pytest.mark.parametrize("position", ["true_case", "false_case"])
def test_conditional_in_branch_is_not_grouped(position):
  inner = ConditionalExpr(ReadVarExpr("c"), ReadVarExpr("d"), ReadVarExpr("e"))
  branches = {"true_case": ReadVarExpr("b"), "false_case": ReadVarExpr("b")}
  branches[position] = inner
  node = translate(ConditionalExpr(ReadVarExpr("a"), **branches))
  assert not isinstance(node.when_true, ParenthesizedExpression)
  assert not isinstance(node.when_false, ParenthesizedExpression)
  expected = "a ? c ? d : e : b" if position == "true_case" else "a ? b : c ? d : e"
  assert node.to_text() == expected


def test_conditional_as_argument_is_not_grouped():
  inner = ConditionalExpr(ReadVarExpr("a"), ReadVarExpr("b"), ReadVarExpr("c"))
  assert render(InvokeFunctionExpr(ReadVarExpr("f"), [inner])) == "f(a ? b : c)"


def test_conditional_without_false_case_yields_undefined():
  assert render(ConditionalExpr(ReadVarExpr("a"), ReadVarExpr("b"))) == "a ? b : undefined"


# --- Annotations and unary forms ---


def test_not():
  assert render(NotExpr(ReadVarExpr("a"))) == "!a"


def test_not_groups_binary_operand():
  expr = NotExpr(BinaryOperatorExpr(BinaryOperator.AND, ReadVarExpr("a"), ReadVarExpr("b")))
  assert render(expr) == "!(a && b)"


def test_assert_not_null_is_identity():
  assert translate(AssertNotNull(ReadVarExpr("a"))) == Identifier("a")


def test_cast_is_identity():
  assert translate(CastExpr(ReadPropExpr(ReadVarExpr("a"), "b"))) == translate(ReadPropExpr(ReadVarExpr("a"), "b"))


def test_typeof():
  assert render(TypeofExpr(ReadVarExpr("x"))) == "typeof x"


def test_unary_minus():
  assert render(UnaryOperatorExpr(UnaryOperator.MINUS, ReadVarExpr("x"))) == "-x"


def test_unary_minus_of_negative_literal_keeps_tokens_apart():
  assert render(UnaryOperatorExpr(UnaryOperator.MINUS, LiteralExpr(-1))) == "- -1"


# --- Binary operators ---


def test_binary_operator():
  expr = BinaryOperatorExpr(BinaryOperator.IDENTICAL, ReadVarExpr("a"), ReadVarExpr("b"))
  assert render(expr) == "a === b"


def test_binary_precedence_grouping():
  sum_ = BinaryOperatorExpr(BinaryOperator.PLUS, ReadVarExpr("a"), ReadVarExpr("b"))
  expr = BinaryOperatorExpr(BinaryOperator.MULTIPLY, sum_, ReadVarExpr("c"))
  assert render(expr) == "(a + b) * c"


def test_binary_left_associativity():
  diff = BinaryOperatorExpr(BinaryOperator.MINUS, ReadVarExpr("b"), ReadVarExpr("c"))
  left = BinaryOperatorExpr(BinaryOperator.MINUS, ReadVarExpr("a"), diff)
  right = BinaryOperatorExpr(BinaryOperator.MINUS, diff, ReadVarExpr("a"))
  assert render(left) == "a - (b - c)"
  assert render(right) == "b - c - a"


def test_unknown_binary_operator_is_fatal():
  expr = BinaryOperatorExpr(BinaryOperator.NULLISH_COALESCE, ReadVarExpr("a"), ReadVarExpr("b"))
  with pytest.raises(UnsupportedOperatorError):
    translate(expr)


# --- Property and key access ---


def test_read_prop():
  assert render(ReadPropExpr(ReadPropExpr(ReadVarExpr("a"), "b"), "c")) == "a.b.c"


def test_read_key():
  assert render(ReadKeyExpr(ReadVarExpr("a"), LiteralExpr(0))) == "a[0]"


def test_read_prop_of_call():
  expr = ReadPropExpr(InvokeFunctionExpr(ReadVarExpr("f")), "x")
  assert render(expr) == "f().x"


# --- Aggregates ---


def test_literal_array():
  expr = LiteralArrayExpr([LiteralExpr(1), ReadVarExpr("a"), LiteralExpr("s")])
  assert render(expr) == '[1, a, "s"]'


def test_literal_map_quoting():
  expr = LiteralMapExpr(
    [
      LiteralMapEntry("plain", LiteralExpr(1), quoted=False),
      LiteralMapEntry("data-attr", LiteralExpr(2), quoted=True),
    ]
  )
  assert render(expr) == '{ plain: 1, "data-attr": 2 }'


def test_empty_literal_map():
  assert render(LiteralMapExpr()) == "{}"


def test_object_literal_statement_is_grouped():
  assert render_stmt(LiteralMapExpr([LiteralMapEntry("a", LiteralExpr(1))])) == "({ a: 1 });"


# --- Function literals ---


def test_function_expression():
  expr = FunctionExpr([FnParam("x")], [ReturnStatement(ReadVarExpr("x"))])
  assert render(expr) == "function(x) {\n  return x;\n}"


def test_named_function_expression():
  expr = FunctionExpr([], [], name="cb")
  assert render(expr) == "function cb() {}"


def test_function_expression_body_inherits_expression_context():
  """The body is visited in the incoming context rather than forced to statement mode."""
  expr = FunctionExpr([], [ExpressionStatement(WriteVarExpr("a", LiteralExpr(1)))])
  # ExpressionStatement itself switches its child back to statement mode.
  assert render(expr) == "function() {\n  a = 1;\n}"


def test_function_expression_body_if_condition_sees_incoming_context():
  """An `if` condition inherits the context, so the propagated expression mode is observable."""
  body = [IfStmt(WriteVarExpr("a", LiteralExpr(1)), [])]
  assert render(FunctionExpr([], body)) == "function() {\n  if ((a = 1)) {}\n}"


def test_function_expression_statement_is_grouped():
  assert render_stmt(InvokeFunctionExpr(FunctionExpr([], []))) == "(function() {}());"


# --- Passthrough and unsupported ---


def test_wrapped_identifier_is_recorded(recorder):
  ident = Identifier("DefaultExport")
  node = translate(WrappedNodeExpr(ident), recorder=recorder)
  assert node is ident
  assert recorder.used_names == ["DefaultExport"]


def test_wrapped_non_identifier_is_not_recorded():
  mock_recorder = MagicMock(spec=DefaultImportRecorder)
  wrapped = StringLiteral("raw")
  node = translate(WrappedNodeExpr(wrapped), recorder=mock_recorder)
  assert node is wrapped
  mock_recorder.record_used_identifier.assert_not_called()


def test_comma_expression_is_not_implemented():
  with pytest.raises(UnsupportedExpressionError):
    translate(CommaExpr([ReadVarExpr("a"), ReadVarExpr("b")]))
