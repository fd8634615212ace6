"""
Source Provenance for IR Nodes.

A span points into an originating file by byte offset. The translator only
reads `start.file.url`, `start.file.content`, `start.offset` and `end.offset`;
line/column data is carried for diagnostics.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ParseSourceFile:
  """An originating file: its full text and the URL it is known by."""

  content: str
  url: str


@dataclass(frozen=True)
class ParseLocation:
  """A single position within a source file."""

  file: ParseSourceFile
  offset: int
  line: int = 0
  col: int = 0

  def __str__(self) -> str:
    return f"{self.file.url}@{self.line}:{self.col}"


@dataclass(frozen=True)
class ParseSourceSpan:
  """A start/end range within one source file."""

  start: ParseLocation
  end: ParseLocation
  details: Optional[str] = None

  @property
  def file(self) -> ParseSourceFile:
    return self.start.file

  def __str__(self) -> str:
    return self.start.file.content[self.start.offset : self.end.offset]


def span_of(file: ParseSourceFile, start: int, end: int) -> ParseSourceSpan:
  """
  Builds a span over `file.content[start:end]`, computing line and column.

  Args:
      file: The originating file.
      start: Start offset (inclusive).
      end: End offset (exclusive).

  Returns:
      ParseSourceSpan: The span.
  """
  return ParseSourceSpan(_location(file, start), _location(file, end))


def _location(file: ParseSourceFile, offset: int) -> ParseLocation:
  prefix = file.content[:offset]
  line = prefix.count("\n")
  col = offset - (prefix.rfind("\n") + 1)
  return ParseLocation(file=file, offset=offset, line=line, col=col)
