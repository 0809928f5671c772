"""
Tree Traversal.

Visitor and transformer base classes for the typed tree, following the
LibCST hook convention:

- ``visit_<NodeKind>(node)`` is called on the way down. Returning ``False``
  skips the node's children.
- ``leave_<NodeKind>(...)`` is called on the way up. For a `TreeVisitor` it
  receives the node; for a `TreeTransformer` it receives
  ``(original_node, updated_node)`` and returns the replacement.

Traversal is depth-first and post-order for replacements, so children are
rewritten before their parent's ``leave_`` hook runs. A parent whose children
all come back identity-equal is itself returned unchanged; only the spine
above a rewritten node is rebuilt.
"""

from typing import Optional

from log_switcheroo.tree.nodes import Tree


class TreeVisitor:
  """
  Read-only traversal.

  Subclasses may override `should_traverse` to stop a scan early.
  """

  def should_traverse(self, node: Tree) -> bool:
    """
    Global gate evaluated before each node.

    Returns:
        bool: False to skip the node and its subtree.
    """
    return True

  def on_visit(self, node: Tree) -> bool:
    method = getattr(self, f"visit_{type(node).__name__}", None)
    if method is not None and method(node) is False:
      return False
    return True

  def on_leave(self, node: Tree) -> None:
    method = getattr(self, f"leave_{type(node).__name__}", None)
    if method is not None:
      method(node)

  def traverse(self, node: Tree) -> Tree:
    """
    Walks the subtree rooted at ``node``.

    Args:
        node: The root to walk.

    Returns:
        Tree: The same node, unchanged.
    """
    if not self.should_traverse(node):
      return node
    if self.on_visit(node):
      for child in node.children():
        self.traverse(child)
    self.on_leave(node)
    return node


class TreeTransformer:
  """
  Rebuilding traversal.

  ``leave_<NodeKind>(original_node, updated_node)`` hooks return the node to
  put in place of ``original_node``. ``updated_node`` already carries any
  rewritten children.
  """

  def on_visit(self, node: Tree) -> bool:
    method = getattr(self, f"visit_{type(node).__name__}", None)
    if method is not None and method(node) is False:
      return False
    return True

  def on_leave(self, original_node: Tree, updated_node: Tree) -> Tree:
    method = getattr(self, f"leave_{type(original_node).__name__}", None)
    if method is None:
      return updated_node
    return method(original_node, updated_node)

  def traverse(self, node: Tree) -> Tree:
    """
    Transforms the subtree rooted at ``node``.

    Args:
        node: The root to transform.

    Returns:
        Tree: The replacement root; ``node`` itself if nothing changed.
    """
    updated = node
    if self.on_visit(node):
      updated = _replace_children(node, self)
    return self.on_leave(node, updated)


def _replace_children(node: Tree, transformer: TreeTransformer) -> Tree:
  changes = {}
  for name in node._child_fields:
    value = getattr(node, name)
    new_value = _transform_field(value, transformer)
    if new_value is not value:
      changes[name] = new_value

  if not changes:
    return node
  return node.with_changes(**changes)


def _transform_field(value: Optional[object], transformer: TreeTransformer) -> Optional[object]:
  if value is None:
    return None
  if isinstance(value, tuple):
    new_items = tuple(transformer.traverse(item) for item in value)
    if all(new is old for new, old in zip(new_items, value)):
      return value
    return new_items
  return transformer.traverse(value)
