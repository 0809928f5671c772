"""
Static Type Model.

Types attached to tree nodes by the parsing collaborator. Only the shapes the
rewrite rules inspect are modelled: primitives (including ``String``), class
types, arrays, and the declared signature of a called method.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


class JavaType:
  """Base class for all static types."""

  pass


@dataclass(frozen=True)
class PrimitiveType(JavaType):
  """
  A primitive type keyword.

  ``String`` is included here because literals are typed with it directly
  rather than with the ``java.lang.String`` class type.
  """

  keyword: str


@dataclass(frozen=True)
class ClassType(JavaType):
  """A nominal type identified by its fully qualified name."""

  fully_qualified_name: str

  @property
  def package_name(self) -> str:
    if "." not in self.fully_qualified_name:
      return ""
    return self.fully_qualified_name.rsplit(".", 1)[0]


@dataclass(frozen=True)
class ArrayType(JavaType):
  """An array of ``element_type``."""

  element_type: JavaType


@dataclass(frozen=True)
class MethodType(JavaType):
  """
  The declared signature of a method, as resolved at the call site.

  Attributes:
      declaring_type (ClassType): The type that declares the method.
      name (str): The method's simple name.
      parameter_types (Tuple[JavaType, ...]): Erased formal parameter types.
      return_type (Optional[JavaType]): Declared return type, if known.
  """

  declaring_type: ClassType
  name: str
  parameter_types: Tuple[JavaType, ...] = field(default_factory=tuple)
  return_type: Optional[JavaType] = None


INT = PrimitiveType("int")
VOID = PrimitiveType("void")
STRING = PrimitiveType("String")

OBJECT = ClassType("java.lang.Object")
STRING_CLASS = ClassType("java.lang.String")


def is_string(java_type: Optional[JavaType]) -> bool:
  """
  Checks whether a type denotes ``java.lang.String``.

  Args:
      java_type: The type to test. ``None`` (unknown) is never a string.

  Returns:
      bool: True for the ``String`` primitive and the String class type.
  """
  if java_type == STRING:
    return True
  return isinstance(java_type, ClassType) and java_type.fully_qualified_name == STRING_CLASS.fully_qualified_name


def type_name(java_type: Optional[JavaType]) -> str:
  """
  Renders a type as fully qualified text.

  Example:
      >>> type_name(ArrayType(OBJECT))
      'java.lang.Object[]'

  Args:
      java_type: The type to render.

  Returns:
      str: The textual name, or an empty string for unknown types.
  """
  if java_type is None:
    return ""
  if java_type == STRING:
    return STRING_CLASS.fully_qualified_name
  if isinstance(java_type, PrimitiveType):
    return java_type.keyword
  if isinstance(java_type, ClassType):
    return java_type.fully_qualified_name
  if isinstance(java_type, ArrayType):
    return f"{type_name(java_type.element_type)}[]"
  if isinstance(java_type, MethodType):
    params = ",".join(type_name(p) for p in java_type.parameter_types)
    return f"{type_name(java_type.declaring_type)} {java_type.name}({params})"
  return ""
