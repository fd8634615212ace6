"""
IR Translator.

Public entry points lowering one IR expression or statement into an output
syntax tree node.

.. code-block:: python

    from ir_lowering.core.translator import translate_expression
    from ir_lowering.core.imports import ImportManager, NoopDefaultImportRecorder
    from ir_lowering.enums import ScriptTarget

    node = translate_expression(expr, ImportManager(), NoopDefaultImportRecorder(), ScriptTarget.ES2015)
    print(node.to_text())
"""

from typing import Union

from ir_lowering.config import TranslatorConfig
from ir_lowering.core.imports import DefaultImportRecorder, ImportManager
from ir_lowering.core.js.nodes import JsExpression, JsStatement
from ir_lowering.core.translator.context import Context
from ir_lowering.core.translator.visitor import ExpressionTranslatorVisitor
from ir_lowering.enums import ScriptTarget
from ir_lowering.ir.nodes import Expression, Statement

TargetLike = Union[TranslatorConfig, ScriptTarget, str]


def translate_expression(
  expression: Expression,
  imports: ImportManager,
  default_import_recorder: DefaultImportRecorder,
  target: TargetLike,
) -> JsExpression:
  """
  Lowers an IR expression, starting in expression mode.

  Args:
      expression: The IR expression.
      imports: Resolves module symbols to local aliases.
      default_import_recorder: Notified of passed-through identifiers.
      target: Capability tier, or a full `TranslatorConfig`.

  Returns:
      JsExpression: The output node.

  Raises:
      TranslationError: If the IR contains a shape with no lowering.
  """
  visitor = ExpressionTranslatorVisitor(imports, default_import_recorder, TranslatorConfig.from_target(target))
  return expression.visit_expression(visitor, Context(False))


def translate_statement(
  statement: Statement,
  imports: ImportManager,
  default_import_recorder: DefaultImportRecorder,
  target: TargetLike,
) -> JsStatement:
  """
  Lowers an IR statement, starting in statement mode.

  Args:
      statement: The IR statement.
      imports: Resolves module symbols to local aliases.
      default_import_recorder: Notified of passed-through identifiers.
      target: Capability tier, or a full `TranslatorConfig`.

  Returns:
      JsStatement: The output node.

  Raises:
      TranslationError: If the IR contains a shape with no lowering.
  """
  visitor = ExpressionTranslatorVisitor(imports, default_import_recorder, TranslatorConfig.from_target(target))
  return statement.visit_statement(visitor, Context(True))


__all__ = ["translate_expression", "translate_statement", "Context", "ExpressionTranslatorVisitor"]
