"""
Diagnostic Rendering of Expressions.

Produces short, Java-like text for expression nodes so log lines and trace
events can show what was matched and what it became. This is not a source
printer: whitespace, comments and statements are not reproduced.
"""

import json

from log_switcheroo.tree.nodes import (
  Expression,
  FieldAccess,
  Identifier,
  Literal,
  MethodInvocation,
  NewArray,
  Tree,
)
from log_switcheroo.tree.types import is_string, type_name

_MAX_LEN = 120


def render(node: Tree) -> str:
  """
  Renders an expression node to text.

  Example:
      ``logger.log(Level.SEVERE, "failed at {0}", ex)``

  Args:
      node: The node to render.

  Returns:
      str: The rendered text. Non-expression nodes render as their kind.
  """
  if isinstance(node, Identifier):
    return node.simple_name

  if isinstance(node, FieldAccess):
    return f"{render(node.target)}.{node.simple_name}"

  if isinstance(node, Literal):
    if node.value_source is not None and not is_string(node.type):
      return node.value_source
    if node.value is None:
      return "null"
    if is_string(node.type):
      return json.dumps(str(node.value), ensure_ascii=False)
    return str(node.value)

  if isinstance(node, NewArray):
    element = type_name(node.element_type).rsplit(".", 1)[-1] or "?"
    dims = "".join(f"[{render(d)}]" for d in node.dimensions) or "[]"
    if node.initializer is None:
      return f"new {element}{dims}"
    items = ", ".join(render(e) for e in node.initializer)
    return f"new {element}{dims}{{{items}}}"

  if isinstance(node, MethodInvocation):
    args = ", ".join(render(a) for a in node.arguments)
    prefix = f"{render(node.select)}." if node.select is not None else ""
    return f"{prefix}{node.simple_name}({args})"

  if isinstance(node, Expression):
    return f"<{type(node).__name__}>"
  return type(node).__name__


def summarize(node: Tree) -> str:
  """Renders ``node`` and truncates the result for single-line logs."""
  text = render(node)
  if len(text) > _MAX_LEN:
    return text[: _MAX_LEN - 3] + "..."
  return text
