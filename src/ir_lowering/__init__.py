"""
ir-lowering Package.

Lowers a backend-neutral statement/expression IR into an ECMAScript syntax
tree, ready to be rendered with `to_text()` or handed to a downstream printer.

Usage
-----

.. code-block:: python

    from ir_lowering import ImportManager, ScriptTarget, translate_expression
    from ir_lowering.core.imports import NoopDefaultImportRecorder
    from ir_lowering.ir import ExternalExpr, ExternalReference

    imports = ImportManager()
    node = translate_expression(
      ExternalExpr(ExternalReference("@angular/core", "Component")),
      imports,
      NoopDefaultImportRecorder(),
      ScriptTarget.ES2015,
    )
    print(node.to_text())
    # i0.Component
"""

from ir_lowering.config import TranslatorConfig
from ir_lowering.core.imports import (
  DefaultImportRecorder,
  DefaultImportTracker,
  ImportManager,
  NoopDefaultImportRecorder,
)
from ir_lowering.core.translator import translate_expression, translate_statement
from ir_lowering.core.translator.errors import (
  InvalidLocalizedStringError,
  TranslationError,
  UnknownSymbolError,
  UnsupportedExpressionError,
  UnsupportedOperatorError,
  UnsupportedStatementError,
)
from ir_lowering.enums import ScriptTarget

__version__ = "0.1.0"

__all__ = [
  "DefaultImportRecorder",
  "DefaultImportTracker",
  "ImportManager",
  "InvalidLocalizedStringError",
  "NoopDefaultImportRecorder",
  "ScriptTarget",
  "TranslationError",
  "TranslatorConfig",
  "UnknownSymbolError",
  "UnsupportedExpressionError",
  "UnsupportedOperatorError",
  "UnsupportedStatementError",
  "translate_expression",
  "translate_statement",
  "__version__",
]
