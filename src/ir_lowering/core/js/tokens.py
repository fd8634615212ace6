"""
ECMAScript Token Definitions.

Defines operator tokens, binding keywords and the precedence levels the
renderer uses to decide where grouping parentheses are required.
"""

from enum import Enum, IntEnum
from typing import Dict


class Token(str, Enum):
  """Operator tokens of the output language."""

  EQUALS = "="
  PLUS = "+"
  MINUS = "-"
  ASTERISK = "*"
  SLASH = "/"
  PERCENT = "%"
  LESS_THAN = "<"
  LESS_THAN_EQUALS = "<="
  GREATER_THAN = ">"
  GREATER_THAN_EQUALS = ">="
  EQUALS_EQUALS = "=="
  EQUALS_EQUALS_EQUALS = "==="
  EXCLAMATION_EQUALS = "!="
  EXCLAMATION_EQUALS_EQUALS = "!=="
  AMPERSAND_AMPERSAND = "&&"
  BAR_BAR = "||"
  AMPERSAND = "&"
  EXCLAMATION = "!"


class VariableKind(str, Enum):
  """Binding keyword of a variable statement."""

  VAR = "var"
  LET = "let"
  CONST = "const"


class Precedence(IntEnum):
  """Expression precedence, lowest binding first."""

  ASSIGNMENT = 3
  CONDITIONAL = 4
  LOGICAL_OR = 5
  LOGICAL_AND = 6
  BITWISE_AND = 9
  EQUALITY = 10
  RELATIONAL = 11
  ADDITIVE = 13
  MULTIPLICATIVE = 14
  UNARY = 16
  LEFT_HAND_SIDE = 19
  PRIMARY = 20


BINARY_PRECEDENCE: Dict[Token, Precedence] = {
  Token.EQUALS: Precedence.ASSIGNMENT,
  Token.BAR_BAR: Precedence.LOGICAL_OR,
  Token.AMPERSAND_AMPERSAND: Precedence.LOGICAL_AND,
  Token.AMPERSAND: Precedence.BITWISE_AND,
  Token.EQUALS_EQUALS: Precedence.EQUALITY,
  Token.EQUALS_EQUALS_EQUALS: Precedence.EQUALITY,
  Token.EXCLAMATION_EQUALS: Precedence.EQUALITY,
  Token.EXCLAMATION_EQUALS_EQUALS: Precedence.EQUALITY,
  Token.LESS_THAN: Precedence.RELATIONAL,
  Token.LESS_THAN_EQUALS: Precedence.RELATIONAL,
  Token.GREATER_THAN: Precedence.RELATIONAL,
  Token.GREATER_THAN_EQUALS: Precedence.RELATIONAL,
  Token.PLUS: Precedence.ADDITIVE,
  Token.MINUS: Precedence.ADDITIVE,
  Token.ASTERISK: Precedence.MULTIPLICATIVE,
  Token.SLASH: Precedence.MULTIPLICATIVE,
  Token.PERCENT: Precedence.MULTIPLICATIVE,
}
