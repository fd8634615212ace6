"""
Source Map Descriptors.

A `SourceMapSource` describes one originating file. Output nodes point back
into it through a `SourceMapRange`. Descriptors are cached per URL for the
lifetime of a single translation run.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceMapSource:
  """Mapping descriptor for one originating file."""

  file_name: str
  text: str

  def skip_trivia(self, pos: int) -> int:
    """Offsets are already exact in the IR, so no trivia is skipped."""
    return pos


@dataclass(frozen=True)
class SourceMapRange:
  """A start/end byte range within a `SourceMapSource`."""

  pos: int
  end: int
  source: Optional[SourceMapSource] = None


class SourceFileCache:
  """
  Lazily built URL -> `SourceMapSource` mapping.

  One cache is owned by one translation run. Entries are created on first
  reference and never evicted, so every node that references the same URL
  shares one descriptor.
  """

  def __init__(self) -> None:
    self._sources: Dict[str, SourceMapSource] = {}

  def get(self, url: str, content: str) -> SourceMapSource:
    """
    Returns the descriptor for `url`, creating it on first use.

    Args:
        url: The originating file URL (cache key).
        content: The full file text, used only when creating the descriptor.

    Returns:
        SourceMapSource: The shared descriptor.
    """
    source = self._sources.get(url)
    if source is None:
      logger.debug("Creating source map descriptor for %s", url)
      source = SourceMapSource(file_name=url, text=content)
      self._sources[url] = source
    return source

  def __contains__(self, url: object) -> bool:
    return url in self._sources

  def __len__(self) -> int:
    return len(self._sources)

  def __iter__(self) -> Iterator[str]:
    return iter(self._sources)
