"""
log-switcheroo Package.

Tree rewrite recipes for migrating Java logging calls between logging APIs.
The package works on an already parsed, typed tree (see `log_switcheroo.tree`)
supplied by the caller and returns a rewritten tree.

Usage
-----

.. code-block:: python

    import log_switcheroo as lsw

    unit = build_unit_somehow()  # CompilationUnit from your parser
    new_unit = lsw.rewrite(unit)

Advanced Usage
^^^^^^^^^^^^^^

.. code-block:: python

    from log_switcheroo import LoggerParametrizedArguments, RuntimeConfig
    from log_switcheroo.context import ExecutionContext

    ctx = ExecutionContext(RuntimeConfig(verbose=True))
    result = LoggerParametrizedArguments().run(unit, ctx)
    print(result.rewrites, result.skipped)
"""

from typing import Optional

from log_switcheroo.config import RuntimeConfig
from log_switcheroo.pipeline import RecipePipeline
from log_switcheroo.recipes import LoggerParametrizedArguments, Recipe, RecipeResult
from log_switcheroo.tree.nodes import CompilationUnit

__version__ = "0.0.1"


def rewrite(unit: CompilationUnit, config: Optional[RuntimeConfig] = None) -> CompilationUnit:
  """
  Runs the configured recipes over one unit.

  Args:
      unit (CompilationUnit): The parsed unit.
      config (RuntimeConfig, optional): Settings. Defaults to the
          ``[tool.log_switcheroo]`` table of the nearest ``pyproject.toml``
          above the working directory, or the built-in defaults without one.

  Returns:
      CompilationUnit: The rewritten unit; the input object itself if no
      call site was rewritten.
  """
  config = config or RuntimeConfig.load()
  results = RecipePipeline.from_config(config).run(unit)
  return results[-1].after if results else unit


__all__ = [
  "rewrite",
  "RuntimeConfig",
  "RecipePipeline",
  "Recipe",
  "RecipeResult",
  "LoggerParametrizedArguments",
  "__version__",
]
