"""
Localized String Lowering.

Emits a `$localize` message in one of two equivalent shapes, chosen purely by
the capability tier:

- ES2015 and later: a tagged template, `` $localize`head${e0}middle${e1}tail` ``.
- Below ES2015: a call on a downlevelled template object,
  ``$localize(__makeTemplateObject(cooked, raw), e0, e1)``, with the helper
  imported from the runtime support module.

Every literal segment and every spliced expression is mapped back to its own
source span.
"""

import logging

from ir_lowering.core.js.nodes import (
  ArrayLiteralExpression,
  CallExpression,
  Identifier,
  JsExpression,
  NoSubstitutionTemplateLiteral,
  TaggedTemplateExpression,
  TemplateExpression,
  TemplateHead,
  TemplateMiddle,
  TemplateSpan,
  TemplateTail,
)
from ir_lowering.core.translator.base import BaseTranslatorMixin
from ir_lowering.core.translator.context import Context
from ir_lowering.core.translator.errors import InvalidLocalizedStringError
from ir_lowering.ir.i18n import LocalizedString

logger = logging.getLogger(__name__)


class LocalizedStringMixin(BaseTranslatorMixin):
  """Implements `visit_localized_string` for both capability tiers."""

  def visit_localized_string(self, ast: LocalizedString, context: Context) -> JsExpression:
    _check_shape(ast)
    if self.target.supports_template_literals:
      logger.debug("Lowering localized string as a tagged template (%s)", self.target.name)
      localized_string = self._create_localized_string_tagged_template(ast, context)
    else:
      logger.debug("Lowering localized string as a function call (%s)", self.target.name)
      localized_string = self._create_localized_string_function_call(ast, context)
    self._set_source_map_range(localized_string, ast.source_span)
    return localized_string

  def _create_localized_string_tagged_template(
    self, ast: LocalizedString, context: Context
  ) -> TaggedTemplateExpression:
    length = len(ast.message_parts)
    meta_block = ast.serialize_i18n_head()

    if length == 1:
      template = NoSubstitutionTemplateLiteral(meta_block.cooked, meta_block.raw)
      self._set_source_map_range(template, ast.get_message_part_source_span(0))
    else:
      head = TemplateHead(meta_block.cooked, meta_block.raw)
      self._set_source_map_range(head, ast.get_message_part_source_span(0))

      spans = []
      for i in range(1, length):
        resolved_expression = ast.expressions[i - 1].visit_expression(self, context)
        self._set_source_map_range(resolved_expression, ast.get_placeholder_source_span(i - 1))
        template_part = ast.serialize_i18n_template_part(i)
        literal_cls = TemplateTail if i == length - 1 else TemplateMiddle
        literal = literal_cls(template_part.cooked, template_part.raw)
        self._set_source_map_range(literal, ast.get_message_part_source_span(i))
        spans.append(TemplateSpan(resolved_expression, literal))

      template = TemplateExpression(head, spans)

    expression = TaggedTemplateExpression(Identifier(self.config.localize_tag), template)
    self._set_source_map_range(expression, ast.source_span)
    return expression

  def _create_localized_string_function_call(self, ast: LocalizedString, context: Context) -> CallExpression:
    # Message parts and expressions interleave as [part0, expr0, part1, ..., partN];
    # part i follows expression i - 1.
    message_parts = [ast.serialize_i18n_head()]
    expressions = []
    for i in range(1, len(ast.message_parts)):
      expressions.append(ast.expressions[i - 1].visit_expression(self, context))
      message_parts.append(ast.serialize_i18n_template_part(i))

    named = self.imports.generate_named_import(self.config.runtime_helper_module, self.config.template_object_helper)
    make_template_object = self._reference(named.module_import, named.symbol)

    cooked_literals = [
      self._create_literal(part.cooked, ast.get_message_part_source_span(i)) for i, part in enumerate(message_parts)
    ]
    raw_literals = [
      self._create_literal(part.raw, ast.get_message_part_source_span(i)) for i, part in enumerate(message_parts)
    ]

    template_object = CallExpression(
      make_template_object,
      [ArrayLiteralExpression(cooked_literals), ArrayLiteralExpression(raw_literals)],
    )
    return CallExpression(Identifier(self.config.localize_tag), [template_object, *expressions])


def _check_shape(ast: LocalizedString) -> None:
  parts = len(ast.message_parts)
  exprs = len(ast.expressions)
  if parts != exprs + 1 or len(ast.placeholder_names) != exprs:
    message = (
      f"Localized string has {parts} message parts, {len(ast.placeholder_names)} placeholders "
      f"and {exprs} expressions; expected one more part than expressions and one placeholder per expression"
    )
    logger.error(message)
    raise InvalidLocalizedStringError(message)
