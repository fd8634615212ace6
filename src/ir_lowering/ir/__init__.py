"""
Backend-neutral IR.

The statement/expression tree that `ir_lowering.core.translator` lowers into
the output syntax tree.
"""

from ir_lowering.ir.comments import JSDocComment, JSDocTag, LeadingComment, jsdoc_comment, leading_comment
from ir_lowering.ir.i18n import CookedRawString, I18nMeta, LiteralPiece, LocalizedString, PlaceholderPiece
from ir_lowering.ir.nodes import (
  UNDEFINED,
  AssertNotNull,
  BinaryOperatorExpr,
  CastExpr,
  ClassStmt,
  CommaExpr,
  ConditionalExpr,
  DeclareFunctionStmt,
  DeclareVarStmt,
  Expression,
  ExpressionStatement,
  ExternalExpr,
  ExternalReference,
  FnParam,
  FunctionExpr,
  IfStmt,
  InstantiateExpr,
  InvokeFunctionExpr,
  InvokeMethodExpr,
  LiteralArrayExpr,
  LiteralExpr,
  LiteralMapEntry,
  LiteralMapExpr,
  NotExpr,
  ReadKeyExpr,
  ReadPropExpr,
  ReadVarExpr,
  ReturnStatement,
  Statement,
  ThrowStmt,
  TryCatchStmt,
  TypeofExpr,
  UnaryOperatorExpr,
  WrappedNodeExpr,
  WriteKeyExpr,
  WritePropExpr,
  WriteVarExpr,
)
from ir_lowering.ir.spans import ParseLocation, ParseSourceFile, ParseSourceSpan, span_of
from ir_lowering.ir.visitor import ExpressionVisitor, StatementVisitor

__all__ = [
  "UNDEFINED",
  "AssertNotNull",
  "BinaryOperatorExpr",
  "CastExpr",
  "ClassStmt",
  "CommaExpr",
  "ConditionalExpr",
  "CookedRawString",
  "DeclareFunctionStmt",
  "DeclareVarStmt",
  "Expression",
  "ExpressionStatement",
  "ExpressionVisitor",
  "ExternalExpr",
  "ExternalReference",
  "FnParam",
  "FunctionExpr",
  "I18nMeta",
  "IfStmt",
  "InstantiateExpr",
  "InvokeFunctionExpr",
  "InvokeMethodExpr",
  "JSDocComment",
  "JSDocTag",
  "LeadingComment",
  "LiteralArrayExpr",
  "LiteralExpr",
  "LiteralMapEntry",
  "LiteralMapExpr",
  "LiteralPiece",
  "LocalizedString",
  "NotExpr",
  "ParseLocation",
  "ParseSourceFile",
  "ParseSourceSpan",
  "PlaceholderPiece",
  "ReadKeyExpr",
  "ReadPropExpr",
  "ReadVarExpr",
  "ReturnStatement",
  "Statement",
  "StatementVisitor",
  "ThrowStmt",
  "TryCatchStmt",
  "TypeofExpr",
  "UnaryOperatorExpr",
  "WrappedNodeExpr",
  "WriteKeyExpr",
  "WritePropExpr",
  "WriteVarExpr",
  "jsdoc_comment",
  "leading_comment",
  "span_of",
]
