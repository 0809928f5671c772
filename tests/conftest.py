"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- A `java` fixture with builders for typed trees, so tests read like the
  Java code they model.
- Console isolation so captured log output does not leak between tests.
"""

import sys
from pathlib import Path
from typing import Optional, Sequence

import pytest

# Add src to path so we can import 'log_switcheroo' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from log_switcheroo.tree.nodes import (  # noqa: E402
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
)
from log_switcheroo.tree.types import (  # noqa: E402
  INT,
  OBJECT,
  STRING,
  STRING_CLASS,
  VOID,
  ArrayType,
  ClassType,
  JavaType,
  MethodType,
)
from log_switcheroo.utils.console import reset_console  # noqa: E402

JUL_LOGGER = ClassType("java.util.logging.Logger")
JUL_LEVEL = ClassType("java.util.logging.Level")
OBJECT_ARRAY = ArrayType(OBJECT)


class JavaTrees:
  """Factory helpers for typed tree nodes."""

  LOGGER = JUL_LOGGER
  LEVEL = JUL_LEVEL
  OBJECT_ARRAY = OBJECT_ARRAY

  @staticmethod
  def ident(name: str, java_type: Optional[JavaType] = None) -> Identifier:
    return Identifier(name, java_type)

  @staticmethod
  def level(name: str) -> FieldAccess:
    """``Level.<name>``"""
    return FieldAccess(Identifier("Level", JUL_LEVEL), Identifier(name, JUL_LEVEL), JUL_LEVEL)

  @staticmethod
  def string(text: str) -> Literal:
    return Literal(text, f'"{text}"', STRING)

  @staticmethod
  def int_literal(value: int) -> Literal:
    return Literal(value, str(value), INT)

  @staticmethod
  def new_array(*elements: Expression, initializer: bool = True, dimensions: Sequence[Expression] = ()) -> NewArray:
    """``new Object[]{elements}``, or ``new Object[dims]`` with ``initializer=False``."""
    return NewArray(
      element_type=OBJECT,
      dimensions=tuple(dimensions),
      initializer=tuple(elements) if initializer else None,
      type=OBJECT_ARRAY,
    )

  @staticmethod
  def jul_log(level: Expression, message: Expression, payload: Expression, array: Optional[bool] = None) -> MethodInvocation:
    """
    ``logger.log(level, message, payload)`` resolved against JUL.

    The overload is chosen from the payload shape unless ``array`` is given.
    """
    if array is None:
      array = isinstance(payload, NewArray) or getattr(payload, "type", None) == OBJECT_ARRAY
    last = OBJECT_ARRAY if array else OBJECT
    return MethodInvocation(
      select=Identifier("logger", JUL_LOGGER),
      name=Identifier("log"),
      arguments=(level, message, payload),
      method_type=MethodType(JUL_LOGGER, "log", (JUL_LEVEL, STRING_CLASS, last), VOID),
    )

  @staticmethod
  def call(
    declaring: str, name: str, params: Sequence[JavaType], *args: Expression, select: Optional[Expression] = None
  ) -> MethodInvocation:
    return MethodInvocation(
      select=select if select is not None else Identifier("target"),
      name=Identifier(name),
      arguments=tuple(args),
      method_type=MethodType(ClassType(declaring), name, tuple(params), VOID),
    )

  @staticmethod
  def unit(*expressions: Expression, path: str = "Example.java") -> CompilationUnit:
    """Wraps expressions as statements of ``class Example { void run() {...} }``."""
    body = Block(tuple(ExpressionStatement(e) for e in expressions))
    method = MethodDeclaration(Identifier("run"), body)
    cls = ClassDeclaration(Identifier("Example"), (method,))
    return CompilationUnit((cls,), package_name="com.example", source_path=path)

  @staticmethod
  def statements(unit: CompilationUnit):
    """Returns the expressions of the single method built by `unit`."""
    return [s.expression for s in unit.classes[0].members[0].body.statements]


@pytest.fixture
def java() -> JavaTrees:
  return JavaTrees()


@pytest.fixture(autouse=True)
def cleanup_console():
  """Ensures console and logging are reset to stdout after every test."""
  reset_console()
  yield
  reset_console()
