"""
Translator Visitor.

Combines the statement, expression and localized-string mixins into the
concrete visitor. Inheriting both abstract IR visitor interfaces means a
missing handler fails at construction time rather than mid-tree.
"""

from ir_lowering.core.translator.expressions import ExpressionTranslatorMixin
from ir_lowering.core.translator.localize import LocalizedStringMixin
from ir_lowering.core.translator.statements import StatementTranslatorMixin
from ir_lowering.ir.visitor import ExpressionVisitor, StatementVisitor


class ExpressionTranslatorVisitor(
  LocalizedStringMixin,
  ExpressionTranslatorMixin,
  StatementTranslatorMixin,
  ExpressionVisitor,
  StatementVisitor,
):
  """
  Lowers one IR tree. Create a fresh instance per top-level call: it owns the
  source-file descriptor cache for that call.
  """
