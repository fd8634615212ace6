"""
Expression Translation Mixin.

Lowers IR expressions to output expressions. Unless a handler says otherwise,
child expressions inherit the incoming context.
"""

import logging

from ir_lowering.core.js.nodes import (
  ArrayLiteralExpression,
  BinaryExpression,
  BooleanLiteral,
  Block,
  CallExpression,
  CommentKind,
  ConditionalExpression,
  ElementAccessExpression,
  FunctionExpression,
  Identifier,
  JsExpression,
  NewExpression,
  NullLiteral,
  NumericLiteral,
  ObjectLiteralExpression,
  Parameter,
  ParenthesizedExpression,
  PrefixUnaryExpression,
  PropertyAccessExpression,
  PropertyAssignment,
  StringLiteral,
  TypeOfExpression,
)
from ir_lowering.core.js.tokens import Token
from ir_lowering.core.translator.base import BaseTranslatorMixin
from ir_lowering.core.translator.context import Context
from ir_lowering.core.translator.errors import UnknownSymbolError, UnsupportedExpressionError
from ir_lowering.core.translator.operators import binary_token, unary_token
from ir_lowering.ir import nodes as ir

logger = logging.getLogger(__name__)

PURE_ANNOTATION = "@__PURE__"


class ExpressionTranslatorMixin(BaseTranslatorMixin):
  """Implements the expression half of the visitor, except localized strings."""

  def visit_read_var_expr(self, ast: ir.ReadVarExpr, context: Context) -> Identifier:
    identifier = Identifier(ast.name)
    self._set_source_map_range(identifier, ast.source_span)
    return identifier

  def visit_write_var_expr(self, expr: ir.WriteVarExpr, context: Context) -> JsExpression:
    result = BinaryExpression(Identifier(expr.name), Token.EQUALS, expr.value.visit_expression(self, context))
    # A bare assignment is not valid in every sub-expression position.
    return result if context.is_statement else ParenthesizedExpression(result)

  def visit_write_key_expr(self, expr: ir.WriteKeyExpr, context: Context) -> JsExpression:
    expr_context = context.with_expression_mode
    lhs = ElementAccessExpression(
      expr.receiver.visit_expression(self, expr_context),
      expr.index.visit_expression(self, expr_context),
    )
    rhs = expr.value.visit_expression(self, expr_context)
    result = BinaryExpression(lhs, Token.EQUALS, rhs)
    return result if context.is_statement else ParenthesizedExpression(result)

  def visit_write_prop_expr(self, expr: ir.WritePropExpr, context: Context) -> BinaryExpression:
    # Never parenthesized, unlike variable and keyed writes.
    return BinaryExpression(
      PropertyAccessExpression(expr.receiver.visit_expression(self, context), Identifier(expr.name)),
      Token.EQUALS,
      expr.value.visit_expression(self, context),
    )

  def visit_invoke_method_expr(self, ast: ir.InvokeMethodExpr, context: Context) -> CallExpression:
    target = ast.receiver.visit_expression(self, context)
    callee = PropertyAccessExpression(target, Identifier(ast.name)) if ast.name is not None else target
    call = CallExpression(callee, self._visit_expressions(ast.args, context))
    self._set_source_map_range(call, ast.source_span)
    return call

  def visit_invoke_function_expr(self, ast: ir.InvokeFunctionExpr, context: Context) -> CallExpression:
    expr = CallExpression(ast.fn.visit_expression(self, context), self._visit_expressions(ast.args, context))
    if ast.pure:
      expr.add_synthetic_leading_comment(CommentKind.MULTI_LINE, PURE_ANNOTATION, False)
    self._set_source_map_range(expr, ast.source_span)
    return expr

  def visit_instantiate_expr(self, ast: ir.InstantiateExpr, context: Context) -> NewExpression:
    return NewExpression(ast.class_expr.visit_expression(self, context), self._visit_expressions(ast.args, context))

  def visit_literal_expr(self, ast: ir.LiteralExpr, context: Context) -> JsExpression:
    value = ast.value
    if value is ir.UNDEFINED:
      expr = Identifier("undefined")
    elif value is None:
      expr = NullLiteral()
    elif isinstance(value, bool):
      expr = BooleanLiteral(value)
    elif isinstance(value, (int, float)):
      expr = NumericLiteral(value)
    else:
      expr = StringLiteral(str(value))
    self._set_source_map_range(expr, ast.source_span)
    return expr

  def visit_external_expr(self, ast: ir.ExternalExpr, context: Context) -> JsExpression:
    ref = ast.value
    if ref.name is None:
      logger.error("External reference without a symbol name: %s", ref)
      raise UnknownSymbolError(f"Import unknown module or symbol {ref}")

    if ref.module_name is None:
      # Ambient symbol: referenced directly.
      return Identifier(ref.name)

    named = self.imports.generate_named_import(ref.module_name, ref.name)
    return self._reference(named.module_import, named.symbol)

  def visit_conditional_expr(self, ast: ir.ConditionalExpr, context: Context) -> ConditionalExpression:
    cond = ast.condition.visit_expression(self, context)

    # Ternaries are right-associative: `a ? b : c ? d : e` reads as
    # `a ? b : (c ? d : e)`. A conditional used as the condition of another
    # encodes a left-associative chain and must be grouped explicitly:
    # `(a == null ? null : a.b) ? c : d`.
    if isinstance(ast.condition, ir.ConditionalExpr):
      cond = ParenthesizedExpression(cond)

    when_true = ast.true_case.visit_expression(self, context)
    if ast.false_case is not None:
      when_false = ast.false_case.visit_expression(self, context)
    else:
      when_false = Identifier("undefined")

    return ConditionalExpression(cond, when_true, when_false)

  def visit_not_expr(self, ast: ir.NotExpr, context: Context) -> PrefixUnaryExpression:
    return PrefixUnaryExpression(Token.EXCLAMATION, ast.condition.visit_expression(self, context))

  def visit_assert_not_null_expr(self, ast: ir.AssertNotNull, context: Context) -> JsExpression:
    return ast.condition.visit_expression(self, context)

  def visit_cast_expr(self, ast: ir.CastExpr, context: Context) -> JsExpression:
    return ast.value.visit_expression(self, context)

  def visit_function_expr(self, ast: ir.FunctionExpr, context: Context) -> FunctionExpression:
    # The body inherits the incoming context as-is; see DeclareFunctionStmt for the
    # statement-mode variant.
    return FunctionExpression(
      name=ast.name or None,
      parameters=[Parameter(p.name) for p in ast.params],
      body=Block(self._visit_statements(ast.statements, context)),
    )

  def visit_unary_operator_expr(self, ast: ir.UnaryOperatorExpr, context: Context) -> PrefixUnaryExpression:
    token = unary_token(ast.operator)
    return PrefixUnaryExpression(token, ast.expr.visit_expression(self, context))

  def visit_binary_operator_expr(self, ast: ir.BinaryOperatorExpr, context: Context) -> BinaryExpression:
    token = binary_token(ast.operator)
    return BinaryExpression(ast.lhs.visit_expression(self, context), token, ast.rhs.visit_expression(self, context))

  def visit_read_prop_expr(self, ast: ir.ReadPropExpr, context: Context) -> PropertyAccessExpression:
    return PropertyAccessExpression(ast.receiver.visit_expression(self, context), Identifier(ast.name))

  def visit_read_key_expr(self, ast: ir.ReadKeyExpr, context: Context) -> ElementAccessExpression:
    return ElementAccessExpression(
      ast.receiver.visit_expression(self, context),
      ast.index.visit_expression(self, context),
    )

  def visit_literal_array_expr(self, ast: ir.LiteralArrayExpr, context: Context) -> ArrayLiteralExpression:
    expr = ArrayLiteralExpression(self._visit_expressions(ast.entries, context))
    self._set_source_map_range(expr, ast.source_span)
    return expr

  def visit_literal_map_expr(self, ast: ir.LiteralMapExpr, context: Context) -> ObjectLiteralExpression:
    entries = [
      PropertyAssignment(
        StringLiteral(entry.key) if entry.quoted else Identifier(entry.key),
        entry.value.visit_expression(self, context),
      )
      for entry in ast.entries
    ]
    expr = ObjectLiteralExpression(entries)
    self._set_source_map_range(expr, ast.source_span)
    return expr

  def visit_comma_expr(self, ast: ir.CommaExpr, context: Context):
    logger.error("Reached a comma expression, which has no lowering")
    raise UnsupportedExpressionError("Method not implemented: comma expression.")

  def visit_wrapped_node_expr(self, ast: ir.WrappedNodeExpr, context: Context):
    if isinstance(ast.node, Identifier):
      self.default_import_recorder.record_used_identifier(ast.node)
    return ast.node

  def visit_typeof_expr(self, ast: ir.TypeofExpr, context: Context) -> TypeOfExpression:
    return TypeOfExpression(ast.expr.visit_expression(self, context))
