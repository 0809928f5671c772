"""
Runtime Configuration Store.

Settings are resolved from explicit arguments first, then from the
``[tool.log_switcheroo]`` table of the nearest ``pyproject.toml``, then from
the field defaults.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  try:
    import tomli as tomllib
  except ImportError:
    tomllib = None  # type: ignore

DEFAULT_RECIPE = "logger-parametrized-arguments"


class RuntimeConfig(BaseModel):
  """
  Configuration for a recipe run.
  """

  precheck: bool = Field(True, description="Skip units that do not call the array overload of Logger.log.")
  verbose: bool = Field(False, description="Emit per-call decisions and a run summary to the log.")
  trace: bool = Field(True, description="Record structured trace events for each run.")
  recipes: List[str] = Field(default_factory=lambda: [DEFAULT_RECIPE], description="Recipes to run, in order.")

  @field_validator("recipes")
  @classmethod
  def validate_recipes(cls, v: List[str]) -> List[str]:
    """
    Ensures every requested recipe is registered.

    Args:
        v (List[str]): Recipe names.

    Returns:
        List[str]: The normalized (lowercase) names.

    Raises:
        ValueError: If a name is not found in the registry.
    """
    from log_switcheroo.recipes import available_recipes

    known = available_recipes()
    cleaned = [name.lower().strip() for name in v]
    for name in cleaned:
      if name not in known:
        raise ValueError(f"Unknown recipe: '{name}'. Available recipes: {known}")
    return cleaned

  @classmethod
  def load(
    cls,
    precheck: Optional[bool] = None,
    verbose: Optional[bool] = None,
    trace: Optional[bool] = None,
    recipes: Optional[List[str]] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and applies overrides.

    Args:
        precheck (Optional[bool]): Override for the pre-check gate.
        verbose (Optional[bool]): Override for verbose logging.
        trace (Optional[bool]): Override for trace recording.
        recipes (Optional[List[str]]): Override for the recipe list.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    values: Dict[str, Any] = {}
    for key, override in (("precheck", precheck), ("verbose", verbose), ("trace", trace), ("recipes", recipes)):
      if override is not None:
        values[key] = override
      elif key in toml_config:
        values[key] = toml_config[key]

    return cls(**values)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches ``start_path`` and its parents for 'pyproject.toml'.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The tool table and the directory it was found in.
  """
  if not tomllib:
    return {}, None

  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get("log_switcheroo", {}), parent

  return {}, None
