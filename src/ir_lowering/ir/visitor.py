"""
IR Visitor Interfaces.

Every IR node dispatches onto one method of these interfaces. Both are
abstract, so a visitor that misses a variant cannot be instantiated.
"""

from abc import ABC, abstractmethod
from typing import Any


class StatementVisitor(ABC):
  """Double-dispatch target for IR statements."""

  @abstractmethod
  def visit_declare_var_stmt(self, stmt, context) -> Any: ...

  @abstractmethod
  def visit_declare_function_stmt(self, stmt, context) -> Any: ...

  @abstractmethod
  def visit_expression_stmt(self, stmt, context) -> Any: ...

  @abstractmethod
  def visit_return_stmt(self, stmt, context) -> Any: ...

  @abstractmethod
  def visit_declare_class_stmt(self, stmt, context) -> Any: ...

  @abstractmethod
  def visit_if_stmt(self, stmt, context) -> Any: ...

  @abstractmethod
  def visit_try_catch_stmt(self, stmt, context) -> Any: ...

  @abstractmethod
  def visit_throw_stmt(self, stmt, context) -> Any: ...


class ExpressionVisitor(ABC):
  """Double-dispatch target for IR expressions."""

  @abstractmethod
  def visit_read_var_expr(self, ast, context) -> Any: ...

  @abstractmethod
  def visit_write_var_expr(self, expr, context) -> Any: ...

  @abstractmethod
  def visit_write_key_expr(self, expr, context) -> Any: ...

  @abstractmethod
  def visit_write_prop_expr(self, expr, context) -> Any: ...

  @abstractmethod
  def visit_invoke_method_expr(self, ast, context) -> Any: ...

  @abstractmethod
  def visit_invoke_function_expr(self, ast, context) -> Any: ...

  @abstractmethod
  def visit_instantiate_expr(self, ast, context) -> Any: ...

  @abstractmethod
  def visit_literal_expr(self, ast, context) -> Any: ...

  @abstractmethod
  def visit_localized_string(self, ast, context) -> Any: ...

  @abstractmethod
  def visit_external_expr(self, ast, context) -> Any: ...

  @abstractmethod
  def visit_conditional_expr(self, ast, context) -> Any: ...

  @abstractmethod
  def visit_not_expr(self, ast, context) -> Any: ...

  @abstractmethod
  def visit_assert_not_null_expr(self, ast, context) -> Any: ...

  @abstractmethod
  def visit_cast_expr(self, ast, context) -> Any: ...

  @abstractmethod
  def visit_function_expr(self, ast, context) -> Any: ...

  @abstractmethod
  def visit_unary_operator_expr(self, ast, context) -> Any: ...

  @abstractmethod
  def visit_binary_operator_expr(self, ast, context) -> Any: ...

  @abstractmethod
  def visit_read_prop_expr(self, ast, context) -> Any: ...

  @abstractmethod
  def visit_read_key_expr(self, ast, context) -> Any: ...

  @abstractmethod
  def visit_literal_array_expr(self, ast, context) -> Any: ...

  @abstractmethod
  def visit_literal_map_expr(self, ast, context) -> Any: ...

  @abstractmethod
  def visit_comma_expr(self, ast, context) -> Any: ...

  @abstractmethod
  def visit_wrapped_node_expr(self, ast, context) -> Any: ...

  @abstractmethod
  def visit_typeof_expr(self, ast, context) -> Any: ...
