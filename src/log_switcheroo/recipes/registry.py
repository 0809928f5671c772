"""
Recipe Registry.

Recipes register themselves under a stable name so a host tool can select
them from configuration.
"""

from typing import Dict, List, Type

_RECIPE_REGISTRY: Dict[str, Type] = {}


def register_recipe(name: str):
  def wrapper(cls):
    _RECIPE_REGISTRY[name] = cls
    return cls

  return wrapper


def available_recipes() -> List[str]:
  return sorted(_RECIPE_REGISTRY.keys())


def get_recipe(name: str):
  """
  Instantiates a registered recipe.

  Args:
      name (str): The registry key.

  Returns:
      Recipe: A new instance.

  Raises:
      ValueError: If no recipe is registered under ``name``.
  """
  cls = _RECIPE_REGISTRY.get(name)
  if cls is None:
    raise ValueError(f"Unknown recipe: '{name}'. Available recipes: {available_recipes()}")
  return cls()
