"""
Recipe Infrastructure.

A recipe is a named rewrite over one `CompilationUnit`. It supplies a
`TreeTransformer` through `get_visitor`, optionally gated by a cheap
precondition via `Preconditions.check`, and `Recipe.run` drives it:

1.  **Pre-check**: the precondition scans the unit. A negative answer returns
    the unit untouched without a rewrite traversal.
2.  **Rewrite**: the transformer walks the unit and replaces matching nodes.
3.  **Report**: a `RecipeResult` captures before/after trees, counters and
    trace events.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, Field

from log_switcheroo.context import ExecutionContext
from log_switcheroo.tree.nodes import CompilationUnit, Tree
from log_switcheroo.tree.visitor import TreeTransformer
from log_switcheroo.utils.console import log_info, log_success, verbosity


class RecipeResult(BaseModel):
  """
  Outcome of running one recipe over one unit.
  """

  recipe: str = Field(description="Registry name of the recipe.")
  before: Any = Field(description="The input unit.")
  after: Any = Field(description="The rewritten unit; identical to 'before' when nothing matched.")
  rewrites: int = Field(default=0, description="Number of replaced call sites.")
  skipped: bool = Field(default=False, description="True if the precondition ruled the unit out.")
  trace_events: List[Dict[str, Any]] = Field(default_factory=list, description="Execution trace log data.")

  @property
  def changed(self) -> bool:
    """
    True if the recipe produced a different tree.

    Returns:
        bool: False when the output is the very same object as the input.
    """
    return self.after is not self.before


class PreconditionCheck(TreeTransformer):
  """
  Transformer wrapper that runs ``visitor`` only if ``precondition`` holds.

  The precondition is evaluated once, against the root passed to `traverse`.

  Attributes:
      precondition (Callable[[Tree], bool]): Existence scan over the root.
      visitor (TreeTransformer): The wrapped rewrite.
      skipped (bool): Set when the last traversal was ruled out.
  """

  def __init__(self, precondition: Callable[[Tree], bool], visitor: TreeTransformer) -> None:
    self.precondition = precondition
    self.visitor = visitor
    self.skipped = False

  def traverse(self, node: Tree) -> Tree:
    self.skipped = not self.precondition(node)
    if self.skipped:
      return node
    return self.visitor.traverse(node)


class Preconditions:
  @staticmethod
  def check(precondition: Callable[[Tree], bool], visitor: TreeTransformer) -> PreconditionCheck:
    """
    Gates ``visitor`` behind ``precondition``.

    The precondition must be conservative: it may accept units the visitor
    then leaves unchanged, but must never reject a unit the visitor would
    rewrite.
    """
    return PreconditionCheck(precondition, visitor)


class Recipe(ABC):
  """
  Abstract contract for a rewrite recipe.

  Subclasses set ``name`` (the registry key) and implement the descriptor
  properties and `get_visitor`.
  """

  name: str = ""

  @property
  @abstractmethod
  def display_name(self) -> str:
    pass

  @property
  @abstractmethod
  def description(self) -> str:
    pass

  @abstractmethod
  def get_visitor(self, ctx: ExecutionContext) -> TreeTransformer:
    """
    Creates the transformer for one run.

    Args:
        ctx: The run's execution context.

    Returns:
        TreeTransformer: A fresh transformer, possibly wrapped in a
        `PreconditionCheck`.
    """
    pass

  def run(self, unit: CompilationUnit, ctx: Optional[ExecutionContext] = None) -> RecipeResult:
    """
    Applies the recipe to a unit.

    Args:
        unit: The unit to rewrite.
        ctx: Execution context; a default one is created if omitted.

    Returns:
        RecipeResult: The rewritten unit and run statistics.
    """
    ctx = ctx or ExecutionContext()
    visitor = self.get_visitor(ctx)
    if isinstance(visitor, PreconditionCheck) and not ctx.config.precheck:
      visitor = visitor.visitor

    start_count = ctx.rewrites
    ctx.tracer.start_phase(self.display_name, unit.source_path)
    with verbosity(ctx.config.verbose):
      after = unit.visit(visitor)
    ctx.tracer.end_phase()

    skipped = isinstance(visitor, PreconditionCheck) and visitor.skipped
    rewrites = ctx.rewrites - start_count

    if ctx.config.verbose:
      label = unit.source_path or "<unit>"
      if skipped:
        log_info(f"[path]{label}[/path]: skipped by precondition of '{self.name}'")
      elif rewrites:
        log_success(f"[path]{label}[/path]: {rewrites} call(s) rewritten by '{self.name}'")
      else:
        log_info(f"[path]{label}[/path]: no changes from '{self.name}'")

    return RecipeResult(
      recipe=self.name,
      before=unit,
      after=after,
      rewrites=rewrites,
      skipped=skipped,
      trace_events=ctx.tracer.export(),
    )
