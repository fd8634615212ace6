"""
Localized String IR.

A `LocalizedString` interleaves literal message parts with expressions:
`[part0, expr0, part1, expr1, ..., partN]`, so there is always one more part
than there are expressions. Each part may be prefixed with a metadata block
delimited by colons; the first part carries the message metadata (meaning,
description, ids) and every later part carries the name of the placeholder
that precedes it.

Serialization produces `CookedRawString` pairs: `cooked` is the runtime
string value and `raw` is the same text escaped for a template literal.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

from ir_lowering.ir.nodes import Expression
from ir_lowering.ir.spans import ParseSourceSpan

MEANING_SEPARATOR = "|"
ID_SEPARATOR = "@@"
LEGACY_ID_INDICATOR = "␟"


@dataclass
class I18nMeta:
  """Message-level metadata serialized into the head of the message."""

  description: Optional[str] = None
  meaning: Optional[str] = None
  custom_id: Optional[str] = None
  legacy_ids: List[str] = field(default_factory=list)


@dataclass
class LiteralPiece:
  text: str
  source_span: Optional[ParseSourceSpan] = None


@dataclass
class PlaceholderPiece:
  text: str
  source_span: Optional[ParseSourceSpan] = None


@dataclass
class CookedRawString:
  cooked: str
  raw: str
  range: Optional[ParseSourceSpan] = None


@dataclass
class LocalizedString(Expression):
  meta_block: I18nMeta
  message_parts: List[LiteralPiece]
  placeholder_names: List[PlaceholderPiece]
  expressions: List[Expression]

  def visit_expression(self, visitor, context):
    return visitor.visit_localized_string(self, context)

  def serialize_i18n_head(self) -> CookedRawString:
    """Serializes the message metadata together with the first message part."""
    meta_block = self.meta_block.description or ""
    if self.meta_block.meaning:
      meta_block = f"{self.meta_block.meaning}{MEANING_SEPARATOR}{meta_block}"
    if self.meta_block.custom_id:
      meta_block = f"{meta_block}{ID_SEPARATOR}{self.meta_block.custom_id}"
    for legacy_id in self.meta_block.legacy_ids:
      meta_block = f"{meta_block}{LEGACY_ID_INDICATOR}{legacy_id}"
    return create_cooked_raw_string(meta_block, self.message_parts[0].text, self.get_message_part_source_span(0))

  def serialize_i18n_template_part(self, part_index: int) -> CookedRawString:
    """Serializes message part `part_index` prefixed by the placeholder before it."""
    placeholder_name = self.placeholder_names[part_index - 1].text
    message_part = self.message_parts[part_index]
    return create_cooked_raw_string(placeholder_name, message_part.text, self.get_message_part_source_span(part_index))

  def get_message_part_source_span(self, i: int) -> Optional[ParseSourceSpan]:
    if i < len(self.message_parts) and self.message_parts[i].source_span is not None:
      return self.message_parts[i].source_span
    return self.source_span

  def get_placeholder_source_span(self, i: int) -> Optional[ParseSourceSpan]:
    if i < len(self.placeholder_names) and self.placeholder_names[i].source_span is not None:
      return self.placeholder_names[i].source_span
    if i < len(self.expressions) and self.expressions[i].source_span is not None:
      return self.expressions[i].source_span
    return self.source_span


def _escape_slashes(text: str) -> str:
  return text.replace("\\", "\\\\")


def _escape_starting_colon(text: str) -> str:
  return re.sub(r"^:", r"\\:", text)


def _escape_colons(text: str) -> str:
  return text.replace(":", "\\:")


def _escape_for_template_literal(text: str) -> str:
  return text.replace("`", "\\`").replace("${", "$\\{")


def create_cooked_raw_string(
  meta_block: str, message_part: str, span: Optional[ParseSourceSpan] = None
) -> CookedRawString:
  """
  Builds the cooked/raw pair for one message part.

  With no metadata the part is used as-is, escaping a leading colon in the raw
  text so it is not read back as a metadata delimiter. Otherwise the metadata
  is wrapped in colons ahead of the part, with colons inside it escaped.

  Args:
      meta_block: Metadata to prefix (may be empty).
      message_part: The literal message text.
      span: Source span of the part.

  Returns:
      CookedRawString: The serialized pair.
  """
  if meta_block == "":
    return CookedRawString(
      cooked=message_part,
      raw=_escape_for_template_literal(_escape_starting_colon(_escape_slashes(message_part))),
      range=span,
    )
  return CookedRawString(
    cooked=f":{meta_block}:{message_part}",
    raw=_escape_for_template_literal(f":{_escape_colons(_escape_slashes(meta_block))}:{_escape_slashes(message_part)}"),
    range=span,
  )
