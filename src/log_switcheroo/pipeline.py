"""
Orchestration logic for executing configured recipes.

This module provides the ``RecipePipeline``, which runs the recipes named in
a `RuntimeConfig` over a unit, feeding each recipe the previous one's output.
"""

from typing import List, Optional

from log_switcheroo.config import RuntimeConfig
from log_switcheroo.context import ExecutionContext
from log_switcheroo.recipes import Recipe, RecipeResult, get_recipe
from log_switcheroo.tree.nodes import CompilationUnit


class RecipePipeline:
  """
  Manages a sequence of recipes and executes them in order.
  """

  def __init__(self, recipes: List[Recipe], config: Optional[RuntimeConfig] = None) -> None:
    """
    Initializes the pipeline.

    Args:
        recipes: Sequenced list of recipes to execute.
        config: Settings shared by every run.
    """
    self.recipes = recipes
    self.config = config or RuntimeConfig()

  @classmethod
  def from_config(cls, config: RuntimeConfig) -> "RecipePipeline":
    """Builds a pipeline from the recipe names listed in ``config``."""
    return cls([get_recipe(name) for name in config.recipes], config)

  def run(self, unit: CompilationUnit) -> List[RecipeResult]:
    """
    Executes all recipes sequentially on the unit.

    Each run gets its own `ExecutionContext`, so units can be processed in
    parallel with separate pipelines or the same one.

    Args:
        unit: The unit to rewrite.

    Returns:
        List[RecipeResult]: One result per recipe; the last ``after`` is the
        final tree.
    """
    results = []
    current = unit
    for recipe in self.recipes:
      result = recipe.run(current, ExecutionContext(self.config))
      results.append(result)
      current = result.after
    return results
