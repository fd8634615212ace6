"""
Operator Tables.

Fixed mappings from IR operator kinds to output tokens. A miss means the IR
producer built an operator this backend cannot express.
"""

import logging
from typing import Dict

from ir_lowering.core.js.tokens import Token
from ir_lowering.core.translator.errors import UnsupportedOperatorError
from ir_lowering.enums import BinaryOperator, UnaryOperator

logger = logging.getLogger(__name__)

UNARY_OPERATORS: Dict[UnaryOperator, Token] = {
  UnaryOperator.MINUS: Token.MINUS,
  UnaryOperator.PLUS: Token.PLUS,
}

BINARY_OPERATORS: Dict[BinaryOperator, Token] = {
  BinaryOperator.AND: Token.AMPERSAND_AMPERSAND,
  BinaryOperator.BIGGER: Token.GREATER_THAN,
  BinaryOperator.BIGGER_EQUALS: Token.GREATER_THAN_EQUALS,
  BinaryOperator.BITWISE_AND: Token.AMPERSAND,
  BinaryOperator.DIVIDE: Token.SLASH,
  BinaryOperator.EQUALS: Token.EQUALS_EQUALS,
  BinaryOperator.IDENTICAL: Token.EQUALS_EQUALS_EQUALS,
  BinaryOperator.LOWER: Token.LESS_THAN,
  BinaryOperator.LOWER_EQUALS: Token.LESS_THAN_EQUALS,
  BinaryOperator.MINUS: Token.MINUS,
  BinaryOperator.MODULO: Token.PERCENT,
  BinaryOperator.MULTIPLY: Token.ASTERISK,
  BinaryOperator.NOT_EQUALS: Token.EXCLAMATION_EQUALS,
  BinaryOperator.NOT_IDENTICAL: Token.EXCLAMATION_EQUALS_EQUALS,
  BinaryOperator.OR: Token.BAR_BAR,
  BinaryOperator.PLUS: Token.PLUS,
}


def unary_token(operator: UnaryOperator) -> Token:
  """
  Looks up the prefix token for a unary operator.

  Raises:
      UnsupportedOperatorError: If the operator has no table entry.
  """
  if operator not in UNARY_OPERATORS:
    logger.error("No output token for unary operator %s", operator)
    raise UnsupportedOperatorError("unary", operator)
  return UNARY_OPERATORS[operator]


def binary_token(operator: BinaryOperator) -> Token:
  """
  Looks up the infix token for a binary operator.

  Raises:
      UnsupportedOperatorError: If the operator has no table entry.
  """
  if operator not in BINARY_OPERATORS:
    logger.error("No output token for binary operator %s", operator)
    raise UnsupportedOperatorError("binary", operator)
  return BINARY_OPERATORS[operator]
