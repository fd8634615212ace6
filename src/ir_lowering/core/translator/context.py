"""
Translation Context.

Carries the single bit threaded through every recursive visit: whether the
node being translated sits in full-statement position or is nested inside an
expression.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Context:
  """Immutable statement/expression mode marker. Derived, never mutated."""

  is_statement: bool

  @property
  def with_expression_mode(self) -> "Context":
    return Context(False) if self.is_statement else self

  @property
  def with_statement_mode(self) -> "Context":
    return self if self.is_statement else Context(True)
