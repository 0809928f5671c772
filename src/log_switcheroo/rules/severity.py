"""
Severity Mapping.

Maps `java.util.logging.Level` enumerants onto SLF4J logger method names.
The mapping is total over the standard levels and silently partial
elsewhere: `OFF`, custom levels and computed levels have no counterpart.
"""

from typing import Dict, Optional

from log_switcheroo.tree.nodes import Expression, FieldAccess

SEVERITY_METHODS: Dict[str, str] = {
  "ALL": "trace",
  "FINEST": "trace",
  "FINER": "trace",
  # CONFIG ranks below INFO in JUL yet maps to info
  "CONFIG": "info",
  "INFO": "info",
  "WARNING": "warn",
  "SEVERE": "error",
}


def map_severity(name: Optional[str]) -> Optional[str]:
  """
  Looks up the SLF4J method for a level name.

  Args:
      name: The enumerant's simple name (e.g. "SEVERE").

  Returns:
      Optional[str]: The target method name, or None if unmapped.
  """
  if not name:
    return None
  return SEVERITY_METHODS.get(name)


def severity_name(expression: Optional[Expression]) -> Optional[str]:
  """
  Extracts the enumerant name from a level argument.

  Only qualified accesses (``Level.SEVERE``) are recognised. Bare identifiers,
  calls such as ``Level.parse("X")`` and anything else yield None.

  Args:
      expression: The first argument of the logging call.

  Returns:
      Optional[str]: The last component of the access, or None.
  """
  if isinstance(expression, FieldAccess) and expression.name is not None:
    return expression.simple_name
  return None


def target_method(expression: Optional[Expression]) -> Optional[str]:
  """Resolves a level argument straight to its SLF4J method name."""
  return map_severity(severity_name(expression))
