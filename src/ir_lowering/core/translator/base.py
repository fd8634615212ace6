"""
Translator Base Utilities.

Defines the mixin holding the per-call state shared by the statement,
expression and localized-string translators: the injected collaborators, the
configuration and the source-file descriptor cache.
"""

from typing import List, Optional

from ir_lowering.config import TranslatorConfig
from ir_lowering.core.imports import DefaultImportRecorder, ImportManager
from ir_lowering.core.js.nodes import Identifier, JsExpression, JsNode, PropertyAccessExpression, StringLiteral
from ir_lowering.core.js.source_map import SourceFileCache, SourceMapRange
from ir_lowering.core.translator.context import Context
from ir_lowering.ir.spans import ParseSourceSpan


class BaseTranslatorMixin:
  """
  State and helpers common to every translator mixin.

  Attributes:
      imports: Resolves module symbols to local aliases.
      default_import_recorder: Notified of identifiers passed through untouched.
      config: Capability tier and well-known names for this call.
  """

  def __init__(
    self,
    imports: ImportManager,
    default_import_recorder: DefaultImportRecorder,
    config: TranslatorConfig,
  ) -> None:
    self.imports = imports
    self.default_import_recorder = default_import_recorder
    self.config = config
    self._external_source_files = SourceFileCache()

  @property
  def target(self):
    return self.config.target

  def _set_source_map_range(self, node: JsNode, source_span: Optional[ParseSourceSpan]) -> None:
    """
    Maps `node` back to `source_span`, sharing one descriptor per file URL.

    Nodes without a span, or whose file has no URL, stay unmapped.
    """
    if source_span is None:
      return
    start, end = source_span.start, source_span.end
    url = start.file.url
    if not url:
      return
    source = self._external_source_files.get(url, start.file.content)
    node.set_source_map_range(SourceMapRange(pos=start.offset, end=end.offset, source=source))

  def _create_literal(self, text: str, span: Optional[ParseSourceSpan]) -> StringLiteral:
    literal = StringLiteral(text)
    self._set_source_map_range(literal, span)
    return literal

  def _reference(self, module_import: Optional[str], symbol: str) -> JsExpression:
    """`symbol` when ambient, `module_import.symbol` otherwise."""
    if module_import is None:
      return Identifier(symbol)
    return PropertyAccessExpression(Identifier(module_import), Identifier(symbol))

  def _visit_expressions(self, expressions, context: Context) -> List[JsExpression]:
    return [e.visit_expression(self, context) for e in expressions]

  def _visit_statements(self, statements, context: Context) -> list:
    return [s.visit_statement(self, context) for s in statements]
