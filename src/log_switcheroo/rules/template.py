"""
Message Template Rewriting.

JUL formats messages with `java.text.MessageFormat` (``"failed at {0}"``)
whereas SLF4J uses anonymous anchors (``"failed at {}"``). Only the
brace-digits-brace form is touched, and only with ASCII digits; format-typed
placeholders such as ``{0,number}`` and stray braces are left exactly as
written.
"""

import re
from typing import Optional

from log_switcheroo.tree.nodes import Expression, Literal
from log_switcheroo.tree.types import STRING, is_string

PLACEHOLDER_RE = re.compile(r"\{[0-9]*\}")
ANCHOR = "{}"


def rewrite_placeholders(text: str) -> str:
  """
  Replaces every ``{N}`` (index optional) with ``{}``.

  Example:
      >>> rewrite_placeholders("vals {0} {1} {x}")
      'vals {} {} {x}'

  Args:
      text: The template text.

  Returns:
      str: The rewritten text.
  """
  return PLACEHOLDER_RE.sub(ANCHOR, text)


def is_string_literal(expression: Optional[Expression]) -> bool:
  """
  Checks for a literal whose static type is String.

  The declared type decides, not the Python value: a char or numeric
  literal is never treated as a template.
  """
  return isinstance(expression, Literal) and is_string(expression.type)


def build_string(text: str) -> Literal:
  """Creates a String literal whose value and source text are ``text``."""
  return Literal(value=text, value_source=text, type=STRING)


def rewrite_template(expression: Optional[Expression]) -> Optional[Literal]:
  """
  Rewrites the message argument of a logging call.

  Args:
      expression: The second argument of the call.

  Returns:
      Optional[Literal]: A new String literal with rewritten placeholders, or
      None if the argument is not a String literal.
  """
  if not is_string_literal(expression):
    return None
  if expression.value is None:
    return None
  return build_string(rewrite_placeholders(str(expression.value)))
