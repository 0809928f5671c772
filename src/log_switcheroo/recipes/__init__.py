"""
Recipes Package.

Importing this package registers the built-in recipes.
"""

from log_switcheroo.recipes.base import PreconditionCheck, Preconditions, Recipe, RecipeResult
from log_switcheroo.recipes.parametrized import LoggerParametrizedArguments, ParametrizedArgumentsTransformer
from log_switcheroo.recipes.registry import available_recipes, get_recipe, register_recipe

__all__ = [
  "Recipe",
  "RecipeResult",
  "Preconditions",
  "PreconditionCheck",
  "LoggerParametrizedArguments",
  "ParametrizedArgumentsTransformer",
  "available_recipes",
  "get_recipe",
  "register_recipe",
]
