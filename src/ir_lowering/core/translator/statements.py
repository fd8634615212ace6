"""
Statement Translation Mixin.

Lowers IR statements to output statements. Children that are statements are
visited in statement mode; expressions held directly by a statement are
visited in expression mode, with two exceptions: an expression statement's
expression stays in statement mode (so a top-level assignment is not
parenthesized) and an `if` condition inherits the incoming context unchanged.
"""

import logging

from ir_lowering.core.js.nodes import (
  Block,
  ExpressionStatement,
  FunctionDeclaration,
  IfStatement,
  Parameter,
  ReturnStatement,
  ThrowStatement,
  VariableDeclaration,
  VariableDeclarationList,
  VariableStatement,
)
from ir_lowering.core.js.tokens import VariableKind
from ir_lowering.core.translator.base import BaseTranslatorMixin
from ir_lowering.core.translator.comments import attach_comments
from ir_lowering.core.translator.context import Context
from ir_lowering.core.translator.errors import UnsupportedStatementError
from ir_lowering.enums import StmtModifier
from ir_lowering.ir import nodes as ir

logger = logging.getLogger(__name__)


class StatementTranslatorMixin(BaseTranslatorMixin):
  """Implements the statement half of the visitor."""

  def visit_declare_var_stmt(self, stmt: ir.DeclareVarStmt, context: Context) -> VariableStatement:
    if not self.target.supports_block_scoping:
      kind = VariableKind.VAR
    elif stmt.has_modifier(StmtModifier.FINAL):
      kind = VariableKind.CONST
    else:
      kind = VariableKind.LET

    initializer = None
    if stmt.value is not None:
      initializer = stmt.value.visit_expression(self, context.with_expression_mode)

    declaration = VariableDeclaration(name=stmt.name, initializer=initializer)
    var_statement = VariableStatement(VariableDeclarationList(declarations=[declaration], kind=kind))
    return attach_comments(var_statement, stmt.leading_comments)

  def visit_declare_function_stmt(self, stmt: ir.DeclareFunctionStmt, context: Context) -> FunctionDeclaration:
    fn_declaration = FunctionDeclaration(
      name=stmt.name,
      parameters=[Parameter(p.name) for p in stmt.params],
      body=Block(self._visit_statements(stmt.statements, context.with_statement_mode)),
    )
    return attach_comments(fn_declaration, stmt.leading_comments)

  def visit_expression_stmt(self, stmt: ir.ExpressionStatement, context: Context) -> ExpressionStatement:
    return attach_comments(
      ExpressionStatement(stmt.expr.visit_expression(self, context.with_statement_mode)),
      stmt.leading_comments,
    )

  def visit_return_stmt(self, stmt: ir.ReturnStatement, context: Context) -> ReturnStatement:
    return attach_comments(
      ReturnStatement(stmt.value.visit_expression(self, context.with_expression_mode)),
      stmt.leading_comments,
    )

  def visit_declare_class_stmt(self, stmt: ir.ClassStmt, context: Context):
    if not self.target.supports_block_scoping:
      message = (
        f'Unsupported mode: Visiting a "declare class" statement (class {stmt.name}) while '
        f"targeting {self.target.name}."
      )
    else:
      message = f'Method not implemented: "declare class" statement (class {stmt.name}).'
    logger.error(message)
    raise UnsupportedStatementError(message)

  def visit_if_stmt(self, stmt: ir.IfStmt, context: Context) -> IfStatement:
    # Branches are lowered before the condition; import aliases are allocated in this order.
    then_block = Block(self._visit_statements(stmt.true_case, context.with_statement_mode))
    else_block = None
    if stmt.false_case:
      else_block = Block(self._visit_statements(stmt.false_case, context.with_statement_mode))

    if_statement = IfStatement(
      expression=stmt.condition.visit_expression(self, context),
      then_statement=then_block,
      else_statement=else_block,
    )
    return attach_comments(if_statement, stmt.leading_comments)

  def visit_try_catch_stmt(self, stmt: ir.TryCatchStmt, context: Context):
    logger.error("Reached a try/catch statement, which has no lowering")
    raise UnsupportedStatementError('Method not implemented: "try/catch" statement.')

  def visit_throw_stmt(self, stmt: ir.ThrowStmt, context: Context) -> ThrowStatement:
    return attach_comments(
      ThrowStatement(stmt.error.visit_expression(self, context.with_expression_mode)),
      stmt.leading_comments,
    )
