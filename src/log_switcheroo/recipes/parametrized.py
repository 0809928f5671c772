"""
Parametrized JUL Logging to SLF4J.

Rewrites ``Logger.log(Level, String, Object)`` and
``Logger.log(Level, String, Object[])`` calls into the matching SLF4J level
method:

.. code-block:: java

    logger.log(Level.SEVERE, "failed at {0}", ex);
    logger.log(Level.FINEST, "vals {0} {1}", new Object[]{x, y});

becomes

.. code-block:: java

    logger.error("failed at {}", ex);
    logger.trace("vals {} {}", x, y);

A matched call is left exactly as written when its level has no SLF4J
counterpart or its message is not a String literal.
"""

import logging
from functools import partial
from typing import Optional, Tuple

from log_switcheroo.context import ExecutionContext
from log_switcheroo.matchers import MethodMatcher
from log_switcheroo.recipes.base import Preconditions, Recipe
from log_switcheroo.recipes.registry import register_recipe
from log_switcheroo.rules.arguments import flatten_arguments
from log_switcheroo.rules.severity import map_severity, severity_name
from log_switcheroo.rules.template import rewrite_template
from log_switcheroo.scanners import uses_method
from log_switcheroo.tree.nodes import Expression, MethodInvocation
from log_switcheroo.tree.types import OBJECT, STRING_CLASS, ArrayType, ClassType, MethodType, type_name
from log_switcheroo.tree.visitor import TreeTransformer
from log_switcheroo.utils.node_text import summarize

logger = logging.getLogger(__name__)

METHOD_MATCHER_PARAM = MethodMatcher(
  "java.util.logging.Logger log(java.util.logging.Level,java.lang.String,java.lang.Object)"
)
METHOD_MATCHER_ARRAY = MethodMatcher(
  "java.util.logging.Logger log(java.util.logging.Level,java.lang.String,java.lang.Object[])"
)

SLF4J_LOGGER = ClassType("org.slf4j.Logger")


class ParametrizedArgumentsTransformer(TreeTransformer):
  """
  Replaces matched ``Logger.log`` calls with SLF4J level calls.

  Each call is decided on its own; the transformer keeps no state between
  call sites other than the run counters on the context.
  """

  def __init__(self, ctx: ExecutionContext) -> None:
    self.ctx = ctx

  def leave_MethodInvocation(self, original_node: MethodInvocation, updated_node: MethodInvocation) -> MethodInvocation:
    """
    Rewrites a call site if it is a parametrized JUL ``log`` call.

    Args:
        original_node: The call as it appeared in the input.
        updated_node: The call with already-rewritten arguments.

    Returns:
        MethodInvocation: The SLF4J call, or ``updated_node`` for any call
        the rule does not apply to.
    """
    if not (METHOD_MATCHER_ARRAY.matches(updated_node) or METHOD_MATCHER_PARAM.matches(updated_node)):
      return updated_node

    call_text = summarize(original_node)
    self.ctx.tracer.log_match(call_text, type_name(updated_node.method_type))

    arguments = updated_node.arguments
    if len(arguments) < 3:
      return self._skip(updated_node, call_text, f"expected 3 arguments, found {len(arguments)}")

    level, message, payload = arguments[0], arguments[1], arguments[2]

    level_name = severity_name(level)
    new_name = map_severity(level_name)
    if new_name is None:
      return self._skip(updated_node, call_text, f"level '{level_name or summarize(level)}' has no SLF4J method")

    template = rewrite_template(message)
    if template is None:
      return self._skip(updated_node, call_text, "message is not a String literal")

    new_arguments: Tuple[Expression, ...] = (template, *flatten_arguments(payload))
    replacement = updated_node.with_changes(
      name=updated_node.name.with_changes(simple_name=new_name),
      arguments=new_arguments,
      method_type=_slf4j_method_type(new_name, updated_node.method_type, len(new_arguments)),
    )

    after_text = summarize(replacement)
    self.ctx.record_rewrite()
    self.ctx.tracer.log_mutation("MethodInvocation", call_text, after_text)
    logger.debug(f"Rewrote {call_text} -> {after_text}")
    return replacement

  def _skip(self, node: MethodInvocation, call_text: str, reason: str) -> MethodInvocation:
    self.ctx.tracer.log_inspection(call_text, "unchanged", reason)
    logger.debug(f"Left {call_text} unchanged: {reason}")
    return node


def _slf4j_method_type(name: str, original: Optional[MethodType], arity: int) -> MethodType:
  """
  Builds the SLF4J signature for a rewritten call.

  SLF4J overloads take the message then one, two, or varargs Object
  parameters.
  """
  params = [STRING_CLASS]
  extra = arity - 1
  if extra <= 2:
    params.extend([OBJECT] * extra)
  else:
    params.append(ArrayType(OBJECT))

  return MethodType(
    declaring_type=SLF4J_LOGGER,
    name=name,
    parameter_types=tuple(params),
    return_type=original.return_type if original else None,
  )


@register_recipe("logger-parametrized-arguments")
class LoggerParametrizedArguments(Recipe):
  """
  Replace parametrized JUL ``Logger.log`` calls with SLF4J level calls.
  """

  name = "logger-parametrized-arguments"

  @property
  def display_name(self) -> str:
    return "Replace parametrized JUL level call with corresponding slf4j method calls"

  @property
  def description(self) -> str:
    return (
      "Replace calls to parametrized `Logger.log(Level,String,…)` call with the corresponding "
      "slf4j method calls transforming the formatter and parameter lists."
    )

  def get_visitor(self, ctx: ExecutionContext) -> TreeTransformer:
    return Preconditions.check(
      partial(uses_method, matcher=METHOD_MATCHER_ARRAY),
      ParametrizedArgumentsTransformer(ctx),
    )
