"""
Import Bookkeeping Collaborators.

The translator never decides how modules are imported; it asks an
`ImportManager` for a local alias and records identifier usage through a
`DefaultImportRecorder`. This module provides the interfaces and the default
implementations of both.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ir_lowering.core.js.nodes import Identifier, NamespaceImport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamedImport:
  """
  Result of resolving a symbol.

  Attributes:
      module_import: Local alias of the module, or None when the symbol is
          referenced directly without an import.
      symbol: The (possibly renamed) symbol.
  """

  module_import: Optional[str]
  symbol: str


class ImportRewriter(ABC):
  """Policy hook deciding whether and how symbols get imported."""

  @abstractmethod
  def should_import_symbol(self, symbol: str, specifier: str) -> bool:
    pass

  @abstractmethod
  def rewrite_symbol(self, symbol: str, specifier: str) -> str:
    pass

  @abstractmethod
  def rewrite_specifier(self, specifier: str, context_path: str) -> str:
    pass


class NoopImportRewriter(ImportRewriter):
  """Imports every symbol, unchanged, from its original module."""

  def should_import_symbol(self, symbol: str, specifier: str) -> bool:
    return True

  def rewrite_symbol(self, symbol: str, specifier: str) -> str:
    return symbol

  def rewrite_specifier(self, specifier: str, context_path: str) -> str:
    return specifier


class ImportManager:
  """
  Allocates one namespace alias per imported module.

  Aliases are `<prefix><n>`, numbered from zero in order of first use and
  stable for the manager's lifetime.
  """

  def __init__(self, rewriter: Optional[ImportRewriter] = None, prefix: str = "i") -> None:
    self.rewriter = rewriter or NoopImportRewriter()
    self.prefix = prefix
    self._specifier_to_identifier: Dict[str, str] = {}
    self._next_index = 0

  @classmethod
  def from_config(cls, config, rewriter: Optional[ImportRewriter] = None) -> "ImportManager":
    """Builds a manager using the alias prefix of a `TranslatorConfig`."""
    return cls(rewriter=rewriter, prefix=config.import_prefix)

  def generate_named_import(self, module_name: str, original_symbol: str) -> NamedImport:
    """
    Resolves `original_symbol` from `module_name` to a local reference.

    Args:
        module_name: The module specifier.
        original_symbol: The exported symbol name.

    Returns:
        NamedImport: The alias (None if no import is needed) and the symbol.
    """
    symbol = self.rewriter.rewrite_symbol(original_symbol, module_name)

    if not self.rewriter.should_import_symbol(symbol, module_name):
      return NamedImport(module_import=None, symbol=symbol)

    if module_name not in self._specifier_to_identifier:
      alias = f"{self.prefix}{self._next_index}"
      self._next_index += 1
      self._specifier_to_identifier[module_name] = alias
      logger.debug("Allocated import alias %s for module %s", alias, module_name)

    return NamedImport(module_import=self._specifier_to_identifier[module_name], symbol=symbol)

  def get_all_imports(self, context_path: str) -> List[Tuple[str, str]]:
    """
    Lists every allocated import as `(specifier, qualifier)` pairs.

    Args:
        context_path: Path of the file the imports will be written into.

    Returns:
        List of pairs in allocation order, specifiers rewritten.
    """
    return [
      (self.rewriter.rewrite_specifier(specifier, context_path), qualifier)
      for specifier, qualifier in self._specifier_to_identifier.items()
    ]

  def to_statements(self, context_path: str) -> List[NamespaceImport]:
    """Renders the allocated imports as `import * as` statements."""
    return [
      NamespaceImport(qualifier=qualifier, specifier=specifier)
      for specifier, qualifier in self.get_all_imports(context_path)
    ]


class DefaultImportRecorder(ABC):
  """Receives every identifier passed through a wrapped-node expression."""

  @abstractmethod
  def record_used_identifier(self, node: Identifier) -> None:
    pass


class NoopDefaultImportRecorder(DefaultImportRecorder):
  """Discards all notifications."""

  def record_used_identifier(self, node: Identifier) -> None:
    pass


class DefaultImportTracker(DefaultImportRecorder):
  """Remembers which identifiers were used, in first-use order."""

  def __init__(self) -> None:
    self._used: Dict[str, Identifier] = {}

  def record_used_identifier(self, node: Identifier) -> None:
    self._used.setdefault(node.text, node)

  @property
  def used_names(self) -> List[str]:
    return list(self._used)

  def is_used(self, name: str) -> bool:
    return name in self._used
