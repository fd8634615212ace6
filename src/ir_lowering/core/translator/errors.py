"""
Translation Errors.

Every error raised by the translator signals an IR shape the producer should
never have handed over. None of them is caught inside the engine; a failed
call yields no output at all.
"""


class TranslationError(Exception):
  """Base class for producer-contract violations."""


class UnsupportedOperatorError(TranslationError):
  """An operator has no entry in the output operator tables."""

  def __init__(self, kind: str, operator: object) -> None:
    name = getattr(operator, "name", operator)
    super().__init__(f"Unknown {kind} operator: {name}")
    self.operator = operator


class UnsupportedStatementError(TranslationError, NotImplementedError):
  """A statement variant with no lowering (class declarations, try/catch)."""


class UnsupportedExpressionError(TranslationError, NotImplementedError):
  """An expression variant with no lowering (comma expressions)."""


class UnknownSymbolError(TranslationError, ValueError):
  """An external reference without a symbol name."""


class InvalidLocalizedStringError(TranslationError, ValueError):
  """A localized string whose parts, placeholders and expressions do not line up."""
