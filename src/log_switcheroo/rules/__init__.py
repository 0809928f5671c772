"""
Pure rewrite rules used by the JUL to SLF4J recipe.
"""

from log_switcheroo.rules.arguments import flatten_arguments
from log_switcheroo.rules.severity import SEVERITY_METHODS, map_severity, severity_name, target_method
from log_switcheroo.rules.template import is_string_literal, rewrite_placeholders, rewrite_template

__all__ = [
  "SEVERITY_METHODS",
  "map_severity",
  "severity_name",
  "target_method",
  "rewrite_placeholders",
  "rewrite_template",
  "is_string_literal",
  "flatten_arguments",
]
