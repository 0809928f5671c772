"""
Typed Syntax Tree Nodes.

This module defines the immutable node set handed over by the parsing
collaborator. Nodes are frozen dataclasses forming a closed set of variants:

- **Expressions**: `Identifier`, `FieldAccess`, `Literal`, `NewArray`,
  `MethodInvocation`.
- **Containers**: `ExpressionStatement`, `Block`, `MethodDeclaration`,
  `ClassDeclaration`, `CompilationUnit`.

Nodes are never mutated. A modified copy is obtained with
``node.with_changes(field=value)``, which keeps the node ``id`` so a rewritten
call still occupies the same position in the tree. Sequences are stored as
tuples; lists passed to constructors are converted on construction.

Node equality is structural: the ``id`` is excluded from comparison.
"""

import dataclasses
import uuid
from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator, Optional, Tuple

from log_switcheroo.tree.types import JavaType, MethodType


def random_id() -> str:
  """Generates a fresh node identifier."""
  return str(uuid.uuid4())


@dataclass(frozen=True)
class Tree:
  """
  Abstract base class for all nodes.

  Subclasses list the names of their node-valued fields in ``_child_fields``,
  in source order. Traversal relies on this ordering.
  """

  _child_fields: ClassVar[Tuple[str, ...]] = ()

  id: str = field(default_factory=random_id, compare=False, repr=False, kw_only=True)

  def __post_init__(self) -> None:
    for name in self._child_fields:
      value = getattr(self, name)
      if isinstance(value, list):
        object.__setattr__(self, name, tuple(value))

  def with_changes(self, **changes: Any) -> "Tree":
    """
    Returns a copy of this node with the given fields replaced.

    Args:
        **changes: Field overrides.

    Returns:
        Tree: A new node of the same kind, carrying the same ``id``.
    """
    return dataclasses.replace(self, **changes)

  def visit(self, visitor: Any) -> "Tree":
    """
    Runs a `TreeVisitor` or `TreeTransformer` over this subtree.

    Returns:
        Tree: The (possibly replaced) node.
    """
    return visitor.traverse(self)

  def children(self) -> Iterator["Tree"]:
    """Yields direct child nodes in source order."""
    for name in self._child_fields:
      value = getattr(self, name)
      if value is None:
        continue
      if isinstance(value, tuple):
        yield from value
      else:
        yield value


@dataclass(frozen=True)
class Expression(Tree):
  """Base class for expression nodes."""

  pass


@dataclass(frozen=True)
class Statement(Tree):
  """Base class for statement and declaration nodes."""

  pass


@dataclass(frozen=True)
class Identifier(Expression):
  """A simple name, e.g. ``logger`` or ``SEVERE``."""

  simple_name: str
  type: Optional[JavaType] = None


@dataclass(frozen=True)
class FieldAccess(Expression):
  """
  A qualified member access, e.g. ``Level.SEVERE``.

  Attributes:
      target (Expression): The qualifier (``Level``).
      name (Identifier): The accessed member (``SEVERE``).
      type (Optional[JavaType]): Static type of the whole access.
  """

  _child_fields: ClassVar[Tuple[str, ...]] = ("target", "name")

  target: Expression
  name: Identifier
  type: Optional[JavaType] = None

  @property
  def simple_name(self) -> str:
    return self.name.simple_name


@dataclass(frozen=True)
class Literal(Expression):
  """
  A literal value.

  Attributes:
      value (Any): The parsed value (``"a {0}"``, ``1``, ``None`` for null).
      value_source (Optional[str]): The literal text as written, if known.
      type (Optional[JavaType]): The static type of the literal.
  """

  value: Any
  value_source: Optional[str] = None
  type: Optional[JavaType] = None


@dataclass(frozen=True)
class NewArray(Expression):
  """
  An array construction, e.g. ``new Object[]{a, b}`` or ``new Object[n]``.

  Attributes:
      element_type (Optional[JavaType]): The declared element type.
      dimensions (Tuple[Expression, ...]): Size expressions, if given.
      initializer (Optional[Tuple[Expression, ...]]): The element list of a
          ``{...}`` initializer, or None when no initializer was written.
      type (Optional[JavaType]): Static type of the expression.
  """

  _child_fields: ClassVar[Tuple[str, ...]] = ("dimensions", "initializer")

  element_type: Optional[JavaType] = None
  dimensions: Tuple[Expression, ...] = ()
  initializer: Optional[Tuple[Expression, ...]] = None
  type: Optional[JavaType] = None


@dataclass(frozen=True)
class MethodInvocation(Expression):
  """
  A method call, e.g. ``logger.log(Level.INFO, "x {0}", x)``.

  Attributes:
      select (Optional[Expression]): The receiver (``logger``), if any.
      name (Identifier): The called method's name.
      arguments (Tuple[Expression, ...]): Actual arguments in order.
      method_type (Optional[MethodType]): Declared signature resolved at this
          call site, or None if the collaborator could not resolve it.
  """

  _child_fields: ClassVar[Tuple[str, ...]] = ("select", "name", "arguments")

  select: Optional[Expression]
  name: Identifier
  arguments: Tuple[Expression, ...] = ()
  method_type: Optional[MethodType] = None

  @property
  def simple_name(self) -> str:
    return self.name.simple_name


@dataclass(frozen=True)
class ExpressionStatement(Statement):
  """An expression evaluated for its effect, e.g. a call followed by ``;``."""

  _child_fields: ClassVar[Tuple[str, ...]] = ("expression",)

  expression: Expression


@dataclass(frozen=True)
class Block(Statement):
  """A braced sequence of statements."""

  _child_fields: ClassVar[Tuple[str, ...]] = ("statements",)

  statements: Tuple[Statement, ...] = ()


@dataclass(frozen=True)
class MethodDeclaration(Statement):
  """A method with a body."""

  _child_fields: ClassVar[Tuple[str, ...]] = ("name", "body")

  name: Identifier
  body: Block = field(default_factory=Block)


@dataclass(frozen=True)
class ClassDeclaration(Statement):
  """A class and its members (methods and nested classes)."""

  _child_fields: ClassVar[Tuple[str, ...]] = ("name", "members")

  name: Identifier
  members: Tuple[Statement, ...] = ()


@dataclass(frozen=True)
class CompilationUnit(Tree):
  """
  The root of one source unit.

  Attributes:
      classes (Tuple[ClassDeclaration, ...]): Top-level type declarations.
      package_name (str): The declared package, empty for the default package.
      source_path (str): Path of the originating file, for diagnostics only.
  """

  _child_fields: ClassVar[Tuple[str, ...]] = ("classes",)

  classes: Tuple[ClassDeclaration, ...] = ()
  package_name: str = ""
  source_path: str = ""
