"""
Tree Scanners for Method Usage Detection.

This module provides the cheap existence scans used as recipe preconditions.
A scan answers "does this unit call method X at least once?" and stops
walking as soon as the answer is known, so units without any relevant call
are skipped without building a single replacement node.
"""

from log_switcheroo.matchers import MethodMatcher
from log_switcheroo.tree.nodes import MethodInvocation, Tree
from log_switcheroo.tree.visitor import TreeVisitor


class UsesMethod(TreeVisitor):
  """
  Scans for any call site matching a `MethodMatcher`.

  Attributes:
      matcher (MethodMatcher): The signature to look for.
      found (bool): Set to True on the first matching call.
  """

  def __init__(self, matcher: MethodMatcher) -> None:
    self.matcher = matcher
    self.found = False

  def visit_MethodInvocation(self, node: MethodInvocation) -> None:
    if not self.found and self.matcher.matches(node):
      self.found = True

  def should_traverse(self, node: Tree) -> bool:
    """Stops the traversal once a match has been seen."""
    return not self.found

  def get_result(self) -> bool:
    return self.found


def uses_method(tree: Tree, matcher: MethodMatcher) -> bool:
  """
  Checks whether ``tree`` contains a call matching ``matcher``.

  Args:
      tree: The subtree to scan, typically a `CompilationUnit`.
      matcher: The signature to look for.

  Returns:
      bool: True if at least one call site matches.
  """
  scanner = UsesMethod(matcher)
  tree.visit(scanner)
  return scanner.get_result()
