"""
Method Signature Matchers.

A `MethodMatcher` decides whether a call site invokes a particular method,
judged by the *declared* signature the collaborator attached to the call
(declaring type, simple name, erased parameter types). Receiver expressions
and argument values are never consulted, so a same-named method on an
unrelated type does not match.

Patterns use the form::

    <declaring type> <method name>(<parameter type>,...)

For example ``java.util.logging.Logger log(java.util.logging.Level,java.lang.String,java.lang.Object[])``.

Wildcards:
    - ``*`` as the declaring type matches any type; ``com.acme.*`` matches any
      type declared directly in ``com.acme``.
    - ``*`` as the method name matches any name.
    - ``*`` as a parameter matches exactly one parameter of any type.
    - ``..`` as a parameter matches zero or more parameters.
"""

import re
from typing import List, Optional, Sequence, Tuple

from log_switcheroo.tree.nodes import MethodInvocation
from log_switcheroo.tree.types import ClassType, JavaType, MethodType, type_name

_PATTERN_RE = re.compile(r"^\s*(?P<type>[\w$.*]+)\s+(?P<name>[\w$*]+)\s*\((?P<params>[^()]*)\)\s*$")
_PARAM_RE = re.compile(r"^(\*|\.\.|[\w$]+(\.[\w$]+)*(\[\])*)$")


class MethodMatcher:
  """
  Matches call sites against a textual method pattern.

  Instances are immutable after construction and safe to share between
  traversals.

  Attributes:
      pattern (str): The original pattern text.
      type_pattern (str): Declaring type part of the pattern.
      name_pattern (str): Method name part of the pattern.
      parameter_patterns (Tuple[str, ...]): Parameter type patterns.
  """

  def __init__(self, pattern: str) -> None:
    """
    Parses the pattern.

    Args:
        pattern: The method pattern text.

    Raises:
        ValueError: If the pattern is malformed.
    """
    match = _PATTERN_RE.match(pattern)
    if not match:
      raise ValueError(f"Invalid method pattern: '{pattern}'. Expected '<type> <name>(<params>)'.")

    self.pattern = pattern
    self.type_pattern = match.group("type")
    self.name_pattern = match.group("name")
    self.parameter_patterns = _parse_parameters(match.group("params"), pattern)

  def __repr__(self) -> str:
    return f"MethodMatcher({self.pattern!r})"

  def matches(self, invocation: MethodInvocation) -> bool:
    """
    Checks a call site against the pattern.

    Args:
        invocation: The call node.

    Returns:
        bool: True if the call's declared signature matches. Calls without a
        resolved signature never match.
    """
    return self.matches_method_type(invocation.method_type)

  def matches_method_type(self, method_type: Optional[MethodType]) -> bool:
    """
    Checks a declared signature against the pattern.

    Args:
        method_type: The signature, or None when unresolved.

    Returns:
        bool: True on a full match.
    """
    if method_type is None:
      return False
    if not self._matches_declaring_type(method_type.declaring_type):
      return False
    if self.name_pattern != "*" and self.name_pattern != method_type.name:
      return False
    return _match_parameters(self.parameter_patterns, method_type.parameter_types)

  def _matches_declaring_type(self, declaring_type: ClassType) -> bool:
    if self.type_pattern == "*":
      return True
    if self.type_pattern.endswith(".*"):
      return declaring_type.package_name == self.type_pattern[:-2]
    return self.type_pattern == declaring_type.fully_qualified_name


def _parse_parameters(raw: str, pattern: str) -> Tuple[str, ...]:
  raw = raw.strip()
  if not raw:
    return ()

  params: List[str] = []
  for part in raw.split(","):
    param = part.strip()
    if not _PARAM_RE.match(param):
      raise ValueError(f"Invalid parameter '{param}' in method pattern '{pattern}'.")
    params.append(param)
  return tuple(params)


def _match_parameters(patterns: Sequence[str], types: Sequence[JavaType]) -> bool:
  if not patterns:
    return not types

  head, rest = patterns[0], patterns[1:]
  if head == "..":
    # Try every split point for the variadic wildcard
    return any(_match_parameters(rest, types[i:]) for i in range(len(types) + 1))

  if not types:
    return False
  if head != "*" and head != type_name(types[0]):
    return False
  return _match_parameters(rest, types[1:])
