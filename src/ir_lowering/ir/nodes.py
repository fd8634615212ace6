"""
IR Statement and Expression Nodes.

The closed set of backend-neutral nodes the translator consumes. Nodes are
produced upstream and treated as read-only. Each node forwards itself to the
matching `visit_*` method of an `ExpressionVisitor` or `StatementVisitor`.

`LocalizedString` lives in `ir_lowering.ir.i18n`.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from ir_lowering.enums import BinaryOperator, StmtModifier, UnaryOperator
from ir_lowering.ir.comments import LeadingComment
from ir_lowering.ir.spans import ParseSourceSpan


class _Undefined:
  """Marker for the `undefined` literal; `None` is reserved for `null`."""

  _instance = None

  def __new__(cls):
    if cls._instance is None:
      cls._instance = super().__new__(cls)
    return cls._instance

  def __repr__(self) -> str:
    return "UNDEFINED"

  def __bool__(self) -> bool:
    return False


UNDEFINED = _Undefined()


@dataclass(frozen=True)
class ExternalReference:
  """A symbol that lives in another module, or an ambient one if `module_name` is None."""

  module_name: Optional[str]
  name: Optional[str]

  def __str__(self) -> str:
    return f"{self.module_name}#{self.name}" if self.module_name else str(self.name)


@dataclass
class FnParam:
  """A function parameter. Only the name survives at this layer."""

  name: str


@dataclass
class LiteralMapEntry:
  """A `key: value` pair of a map literal."""

  key: str
  value: "Expression"
  quoted: bool = False


# --- Expressions ---


@dataclass
class Expression:
  """Base class of every IR expression."""

  source_span: Optional[ParseSourceSpan] = field(default=None, kw_only=True)

  def visit_expression(self, visitor, context) -> Any:
    raise NotImplementedError


@dataclass
class ReadVarExpr(Expression):
  name: str

  def visit_expression(self, visitor, context):
    return visitor.visit_read_var_expr(self, context)


@dataclass
class WriteVarExpr(Expression):
  name: str
  value: Expression

  def visit_expression(self, visitor, context):
    return visitor.visit_write_var_expr(self, context)


@dataclass
class WriteKeyExpr(Expression):
  receiver: Expression
  index: Expression
  value: Expression

  def visit_expression(self, visitor, context):
    return visitor.visit_write_key_expr(self, context)


@dataclass
class WritePropExpr(Expression):
  receiver: Expression
  name: str
  value: Expression

  def visit_expression(self, visitor, context):
    return visitor.visit_write_prop_expr(self, context)


@dataclass
class InvokeMethodExpr(Expression):
  """
  A method call. A `name` of None invokes the receiver itself, which is how
  call-through forms such as `fn(...)` on a computed receiver are expressed.
  """

  receiver: Expression
  name: Optional[str]
  args: List[Expression] = field(default_factory=list)

  def visit_expression(self, visitor, context):
    return visitor.visit_invoke_method_expr(self, context)


@dataclass
class InvokeFunctionExpr(Expression):
  """A function call. `pure` marks the call as free of side effects."""

  fn: Expression
  args: List[Expression] = field(default_factory=list)
  pure: bool = False

  def visit_expression(self, visitor, context):
    return visitor.visit_invoke_function_expr(self, context)


@dataclass
class InstantiateExpr(Expression):
  class_expr: Expression
  args: List[Expression] = field(default_factory=list)

  def visit_expression(self, visitor, context):
    return visitor.visit_instantiate_expr(self, context)


@dataclass
class LiteralExpr(Expression):
  """A primitive literal: `UNDEFINED`, `None` (null), bool, int, float or str."""

  value: Any = UNDEFINED

  def visit_expression(self, visitor, context):
    return visitor.visit_literal_expr(self, context)


@dataclass
class ExternalExpr(Expression):
  value: ExternalReference

  def visit_expression(self, visitor, context):
    return visitor.visit_external_expr(self, context)


@dataclass
class ConditionalExpr(Expression):
  condition: Expression
  true_case: Expression
  false_case: Optional[Expression] = None

  def visit_expression(self, visitor, context):
    return visitor.visit_conditional_expr(self, context)


@dataclass
class NotExpr(Expression):
  condition: Expression

  def visit_expression(self, visitor, context):
    return visitor.visit_not_expr(self, context)


@dataclass
class AssertNotNull(Expression):
  condition: Expression

  def visit_expression(self, visitor, context):
    return visitor.visit_assert_not_null_expr(self, context)


@dataclass
class CastExpr(Expression):
  value: Expression

  def visit_expression(self, visitor, context):
    return visitor.visit_cast_expr(self, context)


@dataclass
class FunctionExpr(Expression):
  params: List[FnParam]
  statements: List["Statement"]
  name: Optional[str] = None

  def visit_expression(self, visitor, context):
    return visitor.visit_function_expr(self, context)


@dataclass
class UnaryOperatorExpr(Expression):
  operator: UnaryOperator
  expr: Expression

  def visit_expression(self, visitor, context):
    return visitor.visit_unary_operator_expr(self, context)


@dataclass
class BinaryOperatorExpr(Expression):
  operator: BinaryOperator
  lhs: Expression
  rhs: Expression

  def visit_expression(self, visitor, context):
    return visitor.visit_binary_operator_expr(self, context)


@dataclass
class ReadPropExpr(Expression):
  receiver: Expression
  name: str

  def visit_expression(self, visitor, context):
    return visitor.visit_read_prop_expr(self, context)


@dataclass
class ReadKeyExpr(Expression):
  receiver: Expression
  index: Expression

  def visit_expression(self, visitor, context):
    return visitor.visit_read_key_expr(self, context)


@dataclass
class LiteralArrayExpr(Expression):
  entries: List[Expression] = field(default_factory=list)

  def visit_expression(self, visitor, context):
    return visitor.visit_literal_array_expr(self, context)


@dataclass
class LiteralMapExpr(Expression):
  entries: List[LiteralMapEntry] = field(default_factory=list)

  def visit_expression(self, visitor, context):
    return visitor.visit_literal_map_expr(self, context)


@dataclass
class CommaExpr(Expression):
  parts: List[Expression] = field(default_factory=list)

  def visit_expression(self, visitor, context):
    return visitor.visit_comma_expr(self, context)


@dataclass
class WrappedNodeExpr(Expression):
  """Carries an already-built output node through translation untouched."""

  node: Any

  def visit_expression(self, visitor, context):
    return visitor.visit_wrapped_node_expr(self, context)


@dataclass
class TypeofExpr(Expression):
  expr: Expression

  def visit_expression(self, visitor, context):
    return visitor.visit_typeof_expr(self, context)


# --- Statements ---


@dataclass
class Statement:
  """Base class of every IR statement."""

  modifiers: List[StmtModifier] = field(default_factory=list, kw_only=True)
  source_span: Optional[ParseSourceSpan] = field(default=None, kw_only=True)
  leading_comments: Optional[List[LeadingComment]] = field(default=None, kw_only=True)

  def has_modifier(self, modifier: StmtModifier) -> bool:
    return modifier in self.modifiers

  def add_leading_comment(self, comment: LeadingComment) -> None:
    if self.leading_comments is None:
      self.leading_comments = []
    self.leading_comments.append(comment)

  def visit_statement(self, visitor, context) -> Any:
    raise NotImplementedError


@dataclass
class DeclareVarStmt(Statement):
  name: str
  value: Optional[Expression] = None

  def visit_statement(self, visitor, context):
    return visitor.visit_declare_var_stmt(self, context)


@dataclass
class DeclareFunctionStmt(Statement):
  name: str
  params: List[FnParam]
  statements: List[Statement]

  def visit_statement(self, visitor, context):
    return visitor.visit_declare_function_stmt(self, context)


@dataclass
class ClassStmt(Statement):
  """A class declaration. No lowering exists for it."""

  name: str
  parent: Optional[Expression] = None

  def visit_statement(self, visitor, context):
    return visitor.visit_declare_class_stmt(self, context)


@dataclass
class ExpressionStatement(Statement):
  expr: Expression

  def visit_statement(self, visitor, context):
    return visitor.visit_expression_stmt(self, context)


@dataclass
class ReturnStatement(Statement):
  value: Expression

  def visit_statement(self, visitor, context):
    return visitor.visit_return_stmt(self, context)


@dataclass
class IfStmt(Statement):
  condition: Expression
  true_case: List[Statement]
  false_case: List[Statement] = field(default_factory=list)

  def visit_statement(self, visitor, context):
    return visitor.visit_if_stmt(self, context)


@dataclass
class TryCatchStmt(Statement):
  body_stmts: List[Statement]
  catch_stmts: List[Statement]

  def visit_statement(self, visitor, context):
    return visitor.visit_try_catch_stmt(self, context)


@dataclass
class ThrowStmt(Statement):
  error: Expression

  def visit_statement(self, visitor, context):
    return visitor.visit_throw_stmt(self, context)
