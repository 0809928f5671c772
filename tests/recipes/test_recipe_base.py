"""
Tests for Recipe Infrastructure and the Recipe Registry.
"""

import pytest

from log_switcheroo.context import ExecutionContext
from log_switcheroo.recipes import registry
from log_switcheroo.recipes.base import PreconditionCheck, Preconditions, Recipe, RecipeResult
from log_switcheroo.recipes.registry import available_recipes, get_recipe, register_recipe
from log_switcheroo.tree.visitor import TreeTransformer


class UppercaseIdentifiers(TreeTransformer):
  def __init__(self, ctx):
    self.ctx = ctx

  def leave_Identifier(self, original_node, updated_node):
    if updated_node.simple_name.isupper():
      return updated_node
    self.ctx.record_rewrite()
    return updated_node.with_changes(simple_name=updated_node.simple_name.upper())


class ShoutRecipe(Recipe):
  name = "shout"

  @property
  def display_name(self):
    return "Shout"

  @property
  def description(self):
    return "Uppercases identifiers."

  def get_visitor(self, ctx):
    return UppercaseIdentifiers(ctx)


@pytest.fixture
def isolated_registry():
  saved = dict(registry._RECIPE_REGISTRY)
  yield
  registry._RECIPE_REGISTRY.clear()
  registry._RECIPE_REGISTRY.update(saved)


def test_precondition_false_skips_visitor(java):
  unit = java.unit(java.ident("x"))
  ctx = ExecutionContext()
  check = Preconditions.check(lambda tree: False, UppercaseIdentifiers(ctx))

  assert isinstance(check, PreconditionCheck)
  assert unit.visit(check) is unit
  assert check.skipped
  assert ctx.rewrites == 0


def test_precondition_true_runs_visitor(java):
  unit = java.unit(java.ident("x"))
  ctx = ExecutionContext()
  check = Preconditions.check(lambda tree: tree is unit, UppercaseIdentifiers(ctx))

  result = unit.visit(check)

  assert not check.skipped
  assert java.statements(result)[0].simple_name == "X"


def test_run_without_precondition(java):
  unit = java.unit(java.ident("x"))
  result = ShoutRecipe().run(unit)

  assert isinstance(result, RecipeResult)
  assert result.recipe == "shout"
  assert result.changed
  assert not result.skipped
  # "Example", "run" and "x" are rewritten
  assert result.rewrites == 3
  assert result.before is unit


def test_rewrites_counted_per_run(java):
  ctx = ExecutionContext()
  recipe = ShoutRecipe()

  recipe.run(java.unit(java.ident("a")), ctx)
  second = recipe.run(java.unit(java.ident("B")), ctx)

  assert second.rewrites == 2
  assert ctx.rewrites == 5


def test_registry_roundtrip(isolated_registry):
  register_recipe("shout")(ShoutRecipe)

  assert "shout" in available_recipes()
  assert isinstance(get_recipe("shout"), ShoutRecipe)


def test_builtin_recipe_registered():
  assert "logger-parametrized-arguments" in available_recipes()


def test_unknown_recipe():
  with pytest.raises(ValueError, match="Unknown recipe"):
    get_recipe("nope")
