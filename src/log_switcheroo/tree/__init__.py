"""
Typed Syntax Tree Package.

Node, type and traversal definitions shared by matchers, scanners and recipes.
"""

from log_switcheroo.tree.nodes import (
  Block,
  ClassDeclaration,
  CompilationUnit,
  Expression,
  ExpressionStatement,
  FieldAccess,
  Identifier,
  Literal,
  MethodDeclaration,
  MethodInvocation,
  NewArray,
  Statement,
  Tree,
)
from log_switcheroo.tree.types import ArrayType, ClassType, JavaType, MethodType, PrimitiveType
from log_switcheroo.tree.visitor import TreeTransformer, TreeVisitor

__all__ = [
  "Tree",
  "Expression",
  "Statement",
  "Identifier",
  "FieldAccess",
  "Literal",
  "NewArray",
  "MethodInvocation",
  "ExpressionStatement",
  "Block",
  "MethodDeclaration",
  "ClassDeclaration",
  "CompilationUnit",
  "JavaType",
  "PrimitiveType",
  "ClassType",
  "ArrayType",
  "MethodType",
  "TreeVisitor",
  "TreeTransformer",
]
