"""
Tests for Method Usage Scanners.
"""

from log_switcheroo.matchers import MethodMatcher
from log_switcheroo.scanners import UsesMethod, uses_method
from log_switcheroo.tree.nodes import MethodInvocation

ARRAY = MethodMatcher("java.util.logging.Logger log(java.util.logging.Level,java.lang.String,java.lang.Object[])")


def test_detects_array_overload(java):
  unit = java.unit(
    java.jul_log(java.level("INFO"), java.string("a"), java.ident("x")),
    java.jul_log(java.level("INFO"), java.string("b {0}"), java.new_array(java.ident("x"))),
  )
  assert uses_method(unit, ARRAY)


def test_ignores_single_object_overload(java):
  unit = java.unit(java.jul_log(java.level("INFO"), java.string("a"), java.ident("x")))
  assert not uses_method(unit, ARRAY)


def test_finds_nested_calls(java):
  inner = java.jul_log(java.level("INFO"), java.string("a"), java.ident("args", java.OBJECT_ARRAY))
  outer = java.call("com.example.Util", "wrap", [java.OBJECT_ARRAY], inner)
  assert uses_method(java.unit(outer), ARRAY)


def test_stops_after_first_match(java):
  calls = [java.jul_log(java.level("INFO"), java.string("a"), java.new_array()) for _ in range(3)]
  inspected = []

  class CountingScanner(UsesMethod):
    def visit_MethodInvocation(self, node: MethodInvocation) -> None:
      inspected.append(node)
      super().visit_MethodInvocation(node)

  scanner = CountingScanner(ARRAY)
  java.unit(*calls).visit(scanner)

  assert scanner.get_result()
  assert inspected == [calls[0]]
