"""
Leading Comments for IR Statements.

Defines plain and JSDoc-style comments that an IR producer may attach ahead
of a statement.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

_COMMENT_DELIMITERS = re.compile(r"/\*|\*/")


@dataclass
class LeadingComment:
  """
  A comment emitted before a statement.

  Attributes:
      text: The comment body, without delimiters.
      multiline: True for a block comment, False for a line comment.
      trailing_newline: Whether the comment is followed by a line break.
  """

  text: str
  multiline: bool = False
  trailing_newline: bool = True

  def __str__(self) -> str:
    return f" {self.text} " if self.multiline else self.text


@dataclass
class JSDocTag:
  """A single `@tag text` entry of a JSDoc comment."""

  tag_name: Optional[str] = None
  text: Optional[str] = None

  def __str__(self) -> str:
    out = ""
    if self.tag_name:
      out += f" @{self.tag_name}"
    if self.text:
      if _COMMENT_DELIMITERS.search(self.text):
        raise ValueError('JSDoc text cannot contain "/*" and "*/"')
      out += " " + self.text.replace("@", "\\@")
    return out


@dataclass
class JSDocComment(LeadingComment):
  """A block comment rendered as `/** ... */` from a list of tags."""

  text: str = ""
  multiline: bool = True
  trailing_newline: bool = True
  tags: List[JSDocTag] = field(default_factory=list)

  def __str__(self) -> str:
    if not self.tags:
      return ""
    if len(self.tags) == 1 and self.tags[0].tag_name and not self.tags[0].text:
      # Single bare tag: `/** @nocollapse */`
      return f"*{self.tags[0]} "

    out = "*\n"
    for tag in self.tags:
      out += " *"
      out += str(tag).replace("\n", "\n * ")
      out += "\n"
    out += " "
    return out


def leading_comment(text: str, multiline: bool = False, trailing_newline: bool = True) -> LeadingComment:
  return LeadingComment(text, multiline, trailing_newline)


def jsdoc_comment(tags: Optional[List[JSDocTag]] = None) -> JSDocComment:
  return JSDocComment(tags=list(tags or []))
