"""
Leading Comment Attachment.

Turns IR leading comments into synthetic trivia on an output statement.
"""

from typing import List, Optional, TypeVar

from ir_lowering.core.js.nodes import CommentKind, JsNode
from ir_lowering.ir.comments import LeadingComment

N = TypeVar("N", bound=JsNode)


def attach_comments(statement: N, leading_comments: Optional[List[LeadingComment]] = None) -> N:
  """
  Attaches `leading_comments` to `statement`, in order.

  A block comment becomes one multi-line trivia unit holding its full text.
  A line comment spanning several lines is split on line breaks; each line
  becomes its own single-line unit sharing the comment's trailing-newline
  flag, so the units concatenated reproduce the original text.

  Args:
      statement: The output node receiving the comments.
      leading_comments: The IR comments, or None.

  Returns:
      The same node, for chaining.
  """
  if leading_comments is None:
    return statement

  for comment in leading_comments:
    if comment.multiline:
      statement.add_synthetic_leading_comment(CommentKind.MULTI_LINE, str(comment), comment.trailing_newline)
    else:
      for line in comment.text.split("\n"):
        statement.add_synthetic_leading_comment(CommentKind.SINGLE_LINE, line, comment.trailing_newline)
  return statement
