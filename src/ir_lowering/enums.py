"""
Enumerations for ir-lowering.

This module defines the operator kinds and statement modifiers carried by the
IR, and the ordered `ScriptTarget` capability tier of the output runtime.
"""

from enum import Enum, IntEnum


class ScriptTarget(IntEnum):
  """
  Ordered output-runtime feature levels.

  Members compare by value, so `target >= ScriptTarget.ES2015` reads as
  "modern tier". The tier is fixed for a whole translation call.
  """

  ES3 = 0
  ES5 = 1
  ES2015 = 2
  ES2016 = 3
  ES2017 = 4
  ES2018 = 5
  ES2019 = 6
  ES2020 = 7
  ESNEXT = 99

  @property
  def supports_block_scoping(self) -> bool:
    """True when `let`/`const` bindings are available."""
    return self >= ScriptTarget.ES2015

  @property
  def supports_template_literals(self) -> bool:
    """True when tagged template literals are available."""
    return self >= ScriptTarget.ES2015

  @classmethod
  def parse(cls, name: str) -> "ScriptTarget":
    """
    Resolves a target from its name (case-insensitive, e.g. 'es5', 'ES2015').

    Args:
        name (str): The target name.

    Returns:
        ScriptTarget: The matching member.

    Raises:
        ValueError: If the name matches no member.
    """
    key = name.strip().upper()
    try:
      return cls[key]
    except KeyError:
      known = ", ".join(m.name for m in cls)
      raise ValueError(f"Unknown script target: '{name}'. Supported targets: {known}")


class UnaryOperator(str, Enum):
  """Prefix operators an IR unary expression may carry."""

  MINUS = "minus"
  PLUS = "plus"


class BinaryOperator(str, Enum):
  """Infix operators an IR binary expression may carry."""

  EQUALS = "equals"  # ==
  NOT_EQUALS = "not_equals"  # !=
  IDENTICAL = "identical"  # ===
  NOT_IDENTICAL = "not_identical"  # !==
  MINUS = "minus"
  PLUS = "plus"
  DIVIDE = "divide"
  MULTIPLY = "multiply"
  MODULO = "modulo"
  AND = "and"  # &&
  OR = "or"  # ||
  BITWISE_AND = "bitwise_and"  # &
  LOWER = "lower"
  LOWER_EQUALS = "lower_equals"
  BIGGER = "bigger"
  BIGGER_EQUALS = "bigger_equals"
  NULLISH_COALESCE = "nullish_coalesce"  # ??, no output token mapped


class StmtModifier(str, Enum):
  """Modifiers attached to IR statements."""

  FINAL = "final"
  PRIVATE = "private"
