"""
Argument Flattening.

SLF4J takes message arguments as varargs, so a literal
``new Object[]{a, b}`` payload becomes ``a, b``. Any other payload, including
an array variable or a sized or empty array construction, is passed through
as a single argument.
"""

from typing import Tuple

from log_switcheroo.tree.nodes import Expression, NewArray


def flatten_arguments(payload: Expression) -> Tuple[Expression, ...]:
  """
  Expands a literal array payload into its elements.

  The check is purely structural: element values and types are not inspected
  and elements are carried through as the same node objects.

  Args:
      payload: The third argument of the logging call.

  Returns:
      Tuple[Expression, ...]: The initializer elements in source order, or
      ``(payload,)``.
  """
  if isinstance(payload, NewArray) and payload.initializer:
    return tuple(payload.initializer)
  return (payload,)
