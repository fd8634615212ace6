"""
ECMAScript Concrete Syntax Tree Nodes.

This module defines the data structures produced by the translator. Every
node can carry synthetic leading comments (trivia) and a source map range,
and renders itself to source text via `to_text`.

Rendering inserts grouping parentheses only where operator precedence
demands them: binary and prefix operands, call/access/`new` receivers and
assignment right-hand sides. A conditional used as the condition of another
conditional is left alone; the translator decides that grouping explicitly.
"""

import json
import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from ir_lowering.core.js.source_map import SourceMapRange
from ir_lowering.core.js.tokens import BINARY_PRECEDENCE, Precedence, Token, VariableKind

INDENT = "  "

_LEADING_BLOCK_COMMENTS = re.compile(r"^(?:/\*.*?\*/\s*)+", re.DOTALL)
_AMBIGUOUS_STATEMENT_START = re.compile(r"^(?:\{|function\b)")


class CommentKind(str, Enum):
  """Kind of a synthetic comment."""

  SINGLE_LINE = "single_line"
  MULTI_LINE = "multi_line"


@dataclass
class SyntheticComment:
  """A comment attached ahead of a node, not taken from any parsed source."""

  kind: CommentKind
  text: str
  has_trailing_newline: bool = False

  def to_text(self, indent: int = 0) -> str:
    if self.kind == CommentKind.MULTI_LINE:
      suffix = "\n" + INDENT * indent if self.has_trailing_newline else " "
      return f"/*{self.text}*/{suffix}"
    # A line comment always ends its line.
    return f"//{self.text}\n" + INDENT * indent


@dataclass
class JsNode(ABC):
  """Abstract base class for all output nodes."""

  leading_comments: List[SyntheticComment] = field(default_factory=list, init=False, repr=False, compare=False)
  source_map_range: Optional[SourceMapRange] = field(default=None, init=False, repr=False, compare=False)

  def add_synthetic_leading_comment(self, kind: CommentKind, text: str, has_trailing_newline: bool = False) -> None:
    self.leading_comments.append(SyntheticComment(kind, text, has_trailing_newline))

  def set_source_map_range(self, source_range: Optional[SourceMapRange]) -> None:
    self.source_map_range = source_range

  def to_text(self, indent: int = 0) -> str:
    """
    Renders the node, leading comments first.

    Args:
        indent: Nesting depth used for lines after the first.

    Returns:
        str: The source text.
    """
    trivia = "".join(c.to_text(indent) for c in self.leading_comments)
    return trivia + self._render(indent)

  @abstractmethod
  def _render(self, indent: int) -> str:
    pass


# --- Expressions ---


@dataclass
class JsExpression(JsNode):
  """Base class for expression nodes."""

  def precedence(self) -> Precedence:
    return Precedence.PRIMARY

  def _render(self, indent: int) -> str:
    raise NotImplementedError


def _operand(node: JsExpression, minimum: int, indent: int) -> str:
  """Renders `node`, grouping it when it binds looser than `minimum`."""
  text = node.to_text(indent)
  if node.precedence() < minimum:
    return f"({text})"
  return text


def _arguments(args: List[JsExpression], indent: int) -> str:
  return ", ".join(_operand(a, Precedence.ASSIGNMENT, indent) for a in args)


@dataclass
class Identifier(JsExpression):
  text: str

  def _render(self, indent: int) -> str:
    return self.text


@dataclass
class NullLiteral(JsExpression):
  def _render(self, indent: int) -> str:
    return "null"


@dataclass
class BooleanLiteral(JsExpression):
  value: bool

  def _render(self, indent: int) -> str:
    return "true" if self.value else "false"


@dataclass
class NumericLiteral(JsExpression):
  value: Union[int, float]

  def precedence(self) -> Precedence:
    if self.value < 0:
      return Precedence.UNARY
    return Precedence.PRIMARY

  def _render(self, indent: int) -> str:
    value = self.value
    if isinstance(value, float):
      if math.isnan(value):
        return "NaN"
      if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
      if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
      return repr(value)
    return str(value)


@dataclass
class StringLiteral(JsExpression):
  text: str

  def _render(self, indent: int) -> str:
    # Line and paragraph separators end a string literal before ES2019.
    text = json.dumps(self.text, ensure_ascii=False)
    return text.replace("\u2028", "\\u2028").replace("\u2029", "\\u2029")


@dataclass
class ParenthesizedExpression(JsExpression):
  expression: JsExpression

  def _render(self, indent: int) -> str:
    return f"({self.expression.to_text(indent)})"


@dataclass
class BinaryExpression(JsExpression):
  left: JsExpression
  operator: Token
  right: JsExpression

  def precedence(self) -> Precedence:
    return BINARY_PRECEDENCE[self.operator]

  def _render(self, indent: int) -> str:
    own = self.precedence()
    if self.operator == Token.EQUALS:
      # Right-associative: `a = b = c` needs no grouping on the right.
      lhs = _operand(self.left, Precedence.LEFT_HAND_SIDE, indent)
      rhs = _operand(self.right, Precedence.ASSIGNMENT, indent)
    else:
      lhs = _operand(self.left, own, indent)
      rhs = _operand(self.right, own + 1, indent)
    return f"{lhs} {self.operator.value} {rhs}"


@dataclass
class PrefixUnaryExpression(JsExpression):
  operator: Token
  operand: JsExpression

  def precedence(self) -> Precedence:
    return Precedence.UNARY

  def _render(self, indent: int) -> str:
    text = _operand(self.operand, Precedence.UNARY, indent)
    op = self.operator.value
    if op in ("+", "-") and text.startswith(op):
      # `- -x` must not collapse into `--x`.
      return f"{op} {text}"
    return f"{op}{text}"


@dataclass
class TypeOfExpression(JsExpression):
  expression: JsExpression

  def precedence(self) -> Precedence:
    return Precedence.UNARY

  def _render(self, indent: int) -> str:
    return f"typeof {_operand(self.expression, Precedence.UNARY, indent)}"


@dataclass
class ConditionalExpression(JsExpression):
  condition: JsExpression
  when_true: JsExpression
  when_false: JsExpression

  def precedence(self) -> Precedence:
    return Precedence.CONDITIONAL

  def _render(self, indent: int) -> str:
    cond = _operand(self.condition, Precedence.CONDITIONAL, indent)
    when_true = _operand(self.when_true, Precedence.ASSIGNMENT, indent)
    when_false = _operand(self.when_false, Precedence.ASSIGNMENT, indent)
    return f"{cond} ? {when_true} : {when_false}"


@dataclass
class CallExpression(JsExpression):
  expression: JsExpression
  arguments: List[JsExpression] = field(default_factory=list)

  def precedence(self) -> Precedence:
    return Precedence.LEFT_HAND_SIDE

  def _render(self, indent: int) -> str:
    callee = _operand(self.expression, Precedence.LEFT_HAND_SIDE, indent)
    return f"{callee}({_arguments(self.arguments, indent)})"


@dataclass
class NewExpression(JsExpression):
  expression: JsExpression
  arguments: List[JsExpression] = field(default_factory=list)

  def precedence(self) -> Precedence:
    return Precedence.LEFT_HAND_SIDE

  def _render(self, indent: int) -> str:
    callee = _operand(self.expression, Precedence.LEFT_HAND_SIDE, indent)
    if _has_leftmost_call(self.expression):
      # Ungrouped, `new a.b().c()` parses as `(new a.b()).c()`.
      callee = f"({callee})"
    return f"new {callee}({_arguments(self.arguments, indent)})"


def _has_leftmost_call(node: JsExpression) -> bool:
  """True when a call sits at the head of `node`'s member/element/tag chain."""
  while True:
    if isinstance(node, CallExpression):
      return True
    if isinstance(node, (PropertyAccessExpression, ElementAccessExpression)):
      node = node.expression
    elif isinstance(node, TaggedTemplateExpression):
      node = node.tag
    else:
      return False


@dataclass
class PropertyAccessExpression(JsExpression):
  expression: JsExpression
  name: Identifier

  def precedence(self) -> Precedence:
    return Precedence.LEFT_HAND_SIDE

  def _render(self, indent: int) -> str:
    receiver = _operand(self.expression, Precedence.LEFT_HAND_SIDE, indent)
    if isinstance(self.expression, NumericLiteral) and receiver.isdigit():
      receiver = f"({receiver})"
    return f"{receiver}.{self.name.to_text(indent)}"


@dataclass
class ElementAccessExpression(JsExpression):
  expression: JsExpression
  argument: JsExpression

  def precedence(self) -> Precedence:
    return Precedence.LEFT_HAND_SIDE

  def _render(self, indent: int) -> str:
    receiver = _operand(self.expression, Precedence.LEFT_HAND_SIDE, indent)
    return f"{receiver}[{self.argument.to_text(indent)}]"


@dataclass
class ArrayLiteralExpression(JsExpression):
  elements: List[JsExpression] = field(default_factory=list)

  def _render(self, indent: int) -> str:
    return f"[{_arguments(self.elements, indent)}]"


@dataclass
class PropertyAssignment(JsNode):
  name: Union[Identifier, StringLiteral]
  initializer: JsExpression

  def _render(self, indent: int) -> str:
    return f"{self.name.to_text(indent)}: {_operand(self.initializer, Precedence.ASSIGNMENT, indent)}"


@dataclass
class ObjectLiteralExpression(JsExpression):
  properties: List[PropertyAssignment] = field(default_factory=list)

  def _render(self, indent: int) -> str:
    if not self.properties:
      return "{}"
    return "{ " + ", ".join(p.to_text(indent) for p in self.properties) + " }"


@dataclass
class Parameter(JsNode):
  name: str

  def _render(self, indent: int) -> str:
    return self.name


@dataclass
class FunctionExpression(JsExpression):
  name: Optional[str]
  parameters: List[Parameter]
  body: "Block"

  def _render(self, indent: int) -> str:
    name = f" {self.name}" if self.name else ""
    params = ", ".join(p.to_text(indent) for p in self.parameters)
    return f"function{name}({params}) {self.body.to_text(indent)}"


# --- Template literals ---


@dataclass
class TemplateLiteralLike(JsNode):
  """A literal template segment: `text` is cooked, `raw_text` is what gets printed."""

  text: str
  raw_text: str


@dataclass
class NoSubstitutionTemplateLiteral(TemplateLiteralLike, JsExpression):
  def _render(self, indent: int) -> str:
    return f"`{self.raw_text}`"


@dataclass
class TemplateHead(TemplateLiteralLike):
  def _render(self, indent: int) -> str:
    return f"`{self.raw_text}${{"


@dataclass
class TemplateMiddle(TemplateLiteralLike):
  def _render(self, indent: int) -> str:
    return f"}}{self.raw_text}${{"


@dataclass
class TemplateTail(TemplateLiteralLike):
  def _render(self, indent: int) -> str:
    return f"}}{self.raw_text}`"


@dataclass
class TemplateSpan(JsNode):
  expression: JsExpression
  literal: Union[TemplateMiddle, TemplateTail]

  def _render(self, indent: int) -> str:
    return self.expression.to_text(indent) + self.literal.to_text(indent)


@dataclass
class TemplateExpression(JsExpression):
  head: TemplateHead
  template_spans: List[TemplateSpan]

  def _render(self, indent: int) -> str:
    return self.head.to_text(indent) + "".join(s.to_text(indent) for s in self.template_spans)


@dataclass
class TaggedTemplateExpression(JsExpression):
  tag: JsExpression
  template: Union[NoSubstitutionTemplateLiteral, TemplateExpression]

  def precedence(self) -> Precedence:
    return Precedence.LEFT_HAND_SIDE

  def _render(self, indent: int) -> str:
    return _operand(self.tag, Precedence.LEFT_HAND_SIDE, indent) + self.template.to_text(indent)


# --- Statements ---


@dataclass
class JsStatement(JsNode):
  """Base class for statement nodes."""

  def _render(self, indent: int) -> str:
    raise NotImplementedError


@dataclass
class Block(JsStatement):
  statements: List[JsStatement] = field(default_factory=list)

  def _render(self, indent: int) -> str:
    if not self.statements:
      return "{}"
    inner = INDENT * (indent + 1)
    lines = "".join(f"\n{inner}{s.to_text(indent + 1)}" for s in self.statements)
    return "{" + lines + "\n" + INDENT * indent + "}"


@dataclass
class VariableDeclaration(JsNode):
  name: str
  initializer: Optional[JsExpression] = None

  def _render(self, indent: int) -> str:
    if self.initializer is None:
      return self.name
    return f"{self.name} = {_operand(self.initializer, Precedence.ASSIGNMENT, indent)}"


@dataclass
class VariableDeclarationList(JsNode):
  declarations: List[VariableDeclaration]
  kind: VariableKind = VariableKind.VAR

  def _render(self, indent: int) -> str:
    return f"{self.kind.value} " + ", ".join(d.to_text(indent) for d in self.declarations)


@dataclass
class VariableStatement(JsStatement):
  declaration_list: VariableDeclarationList

  def _render(self, indent: int) -> str:
    return self.declaration_list.to_text(indent) + ";"


@dataclass
class FunctionDeclaration(JsStatement):
  name: str
  parameters: List[Parameter]
  body: Block

  def _render(self, indent: int) -> str:
    params = ", ".join(p.to_text(indent) for p in self.parameters)
    return f"function {self.name}({params}) {self.body.to_text(indent)}"


@dataclass
class ExpressionStatement(JsStatement):
  expression: JsExpression

  def _render(self, indent: int) -> str:
    text = self.expression.to_text(indent)
    if _AMBIGUOUS_STATEMENT_START.match(_LEADING_BLOCK_COMMENTS.sub("", text)):
      # A leading `{` or `function` would be read as a block or declaration.
      text = f"({text})"
    return text + ";"


@dataclass
class ReturnStatement(JsStatement):
  expression: Optional[JsExpression] = None

  def _render(self, indent: int) -> str:
    if self.expression is None:
      return "return;"
    return f"return {self.expression.to_text(indent)};"


@dataclass
class ThrowStatement(JsStatement):
  expression: JsExpression

  def _render(self, indent: int) -> str:
    return f"throw {self.expression.to_text(indent)};"


@dataclass
class IfStatement(JsStatement):
  expression: JsExpression
  then_statement: Block
  else_statement: Optional[Block] = None

  def _render(self, indent: int) -> str:
    out = f"if ({self.expression.to_text(indent)}) {self.then_statement.to_text(indent)}"
    if self.else_statement is not None:
      out += f" else {self.else_statement.to_text(indent)}"
    return out


@dataclass
class NamespaceImport(JsStatement):
  """`import * as <qualifier> from "<specifier>";`"""

  qualifier: str
  specifier: str

  def _render(self, indent: int) -> str:
    return f"import * as {self.qualifier} from {json.dumps(self.specifier)};"


def print_statements(statements: List[JsStatement]) -> str:
  """Renders top-level statements one per line."""
  return "\n".join(s.to_text() for s in statements) + "\n"
