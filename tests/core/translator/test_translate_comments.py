"""
Tests for leading comment attachment on statements.
"""

import pytest

from ir_lowering.core.js.nodes import CommentKind
from ir_lowering.core.translator import translate_statement
from ir_lowering.enums import ScriptTarget
from ir_lowering.ir import (
  DeclareFunctionStmt,
  DeclareVarStmt,
  ExpressionStatement,
  JSDocTag,
  LiteralExpr,
  ReadVarExpr,
  ReturnStatement,
  ThrowStmt,
  jsdoc_comment,
  leading_comment,
)


def lower(stmt, imports, recorder):
  return translate_statement(stmt, imports, recorder, ScriptTarget.ES2015)


def test_block_comment_is_one_unit(imports, recorder):
  stmt = DeclareVarStmt("x", leading_comments=[leading_comment("doc", multiline=True)])
  node = lower(stmt, imports, recorder)

  assert len(node.leading_comments) == 1
  trivia = node.leading_comments[0]
  assert trivia.kind == CommentKind.MULTI_LINE
  assert trivia.text == " doc "
  assert trivia.has_trailing_newline
  assert node.to_text() == "/* doc */\nlet x;"


def test_block_comment_without_trailing_newline(imports, recorder):
  stmt = DeclareVarStmt("x", leading_comments=[leading_comment("inline", multiline=True, trailing_newline=False)])
  assert lower(stmt, imports, recorder).to_text() == "/* inline */ let x;"


@pytest.mark.parametrize("text", ["one", "a\nb", "a\nb\nc", "\nx\n"])
def test_line_comment_splits_per_line(imports, recorder, text):
  stmt = DeclareVarStmt("x", leading_comments=[leading_comment(text)])
  node = lower(stmt, imports, recorder)

  assert len(node.leading_comments) == text.count("\n") + 1
  assert all(c.kind == CommentKind.SINGLE_LINE for c in node.leading_comments)
  assert "\n".join(c.text for c in node.leading_comments) == text


def test_line_comment_units_share_trailing_flag(imports, recorder):
  stmt = DeclareVarStmt("x", leading_comments=[leading_comment("a\nb", trailing_newline=False)])
  node = lower(stmt, imports, recorder)
  assert [c.has_trailing_newline for c in node.leading_comments] == [False, False]


def test_multi_line_line_comment_renders(imports, recorder):
  stmt = DeclareVarStmt("x", leading_comments=[leading_comment("a\nb\nc")])
  assert lower(stmt, imports, recorder).to_text() == "//a\n//b\n//c\nlet x;"


def test_comments_keep_order(imports, recorder):
  stmt = ExpressionStatement(
    ReadVarExpr("go"),
    leading_comments=[leading_comment("first"), leading_comment("second", multiline=True)],
  )
  assert lower(stmt, imports, recorder).to_text() == "//first\n/* second */\ngo;"


def test_jsdoc_single_bare_tag(imports, recorder):
  stmt = DeclareVarStmt("x", leading_comments=[jsdoc_comment([JSDocTag("nocollapse")])])
  assert lower(stmt, imports, recorder).to_text() == "/** @nocollapse */\nlet x;"


def test_jsdoc_block(imports, recorder):
  comment = jsdoc_comment([JSDocTag("param", "x the value"), JSDocTag("returns", "twice x")])
  stmt = DeclareFunctionStmt("twice", [], [], leading_comments=[comment])
  assert lower(stmt, imports, recorder).to_text() == (
    "/**\n * @param x the value\n * @returns twice x\n */\nfunction twice() {}"
  )


def test_nested_comment_follows_indentation(imports, recorder):
  body = [ReturnStatement(LiteralExpr(1), leading_comments=[leading_comment("note")])]
  stmt = DeclareFunctionStmt("f", [], body)
  assert lower(stmt, imports, recorder).to_text() == "function f() {\n  //note\n  return 1;\n}"


def test_added_comment_is_attached(imports, recorder):
  stmt = ThrowStmt(ReadVarExpr("err"))
  stmt.add_leading_comment(leading_comment("unreachable"))
  assert lower(stmt, imports, recorder).to_text() == "//unreachable\nthrow err;"


def test_statement_without_comments_has_no_trivia(imports, recorder):
  assert lower(DeclareVarStmt("x"), imports, recorder).leading_comments == []
