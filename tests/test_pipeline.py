"""
Tests for the Recipe Pipeline and the package-level `rewrite` entry point.
"""

import log_switcheroo as lsw
from log_switcheroo.config import RuntimeConfig
from log_switcheroo.pipeline import RecipePipeline
from log_switcheroo.recipes import LoggerParametrizedArguments
from log_switcheroo.utils.node_text import render


def test_rewrite_entry_point(java, tmp_path, monkeypatch):
  monkeypatch.chdir(tmp_path)
  unit = java.unit(
    java.jul_log(java.level("SEVERE"), java.string("failed at {0}"), java.ident("ex")),
    java.jul_log(java.level("FINEST"), java.string("vals {0} {1}"), java.new_array(java.ident("x"), java.ident("y"))),
  )

  result = lsw.rewrite(unit)

  assert [render(s) for s in java.statements(result)] == [
    'logger.error("failed at {}", ex)',
    'logger.trace("vals {} {}", x, y)',
  ]


def test_rewrite_returns_input_when_nothing_applies(java, tmp_path, monkeypatch):
  monkeypatch.chdir(tmp_path)
  unit = java.unit(java.call("com.example.Util", "run", []))
  assert lsw.rewrite(unit) is unit


def test_pipeline_from_config():
  pipeline = RecipePipeline.from_config(RuntimeConfig())
  assert len(pipeline.recipes) == 1
  assert isinstance(pipeline.recipes[0], LoggerParametrizedArguments)


def test_pipeline_chains_results(java):
  unit = java.unit(java.jul_log(java.level("INFO"), java.string("a {0}"), java.new_array(java.ident("x"))))
  recipe = LoggerParametrizedArguments()
  pipeline = RecipePipeline([recipe, recipe])

  first, second = pipeline.run(unit)

  assert first.rewrites == 1
  # The second pass sees SLF4J calls only and is ruled out by the pre-check
  assert second.before is first.after
  assert second.skipped
  assert second.after is first.after


def test_empty_pipeline(java):
  unit = java.unit()
  assert RecipePipeline([]).run(unit) == []


def test_rewrite_reads_pyproject_settings(java, tmp_path, monkeypatch):
  (tmp_path / "pyproject.toml").write_text("[tool.log_switcheroo]\nprecheck = false\n")
  monkeypatch.chdir(tmp_path)
  # Only the single Object overload; the pre-check looks for the array one
  unit = java.unit(java.jul_log(java.level("SEVERE"), java.string("failed at {0}"), java.ident("ex")))

  result = lsw.rewrite(unit)

  assert [render(s) for s in java.statements(result)] == ['logger.error("failed at {}", ex)']


def test_rewrite_defaults_without_pyproject_table(java, tmp_path, monkeypatch):
  (tmp_path / "pyproject.toml").write_text("[project]\nname = \"demo\"\n")
  monkeypatch.chdir(tmp_path)
  unit = java.unit(java.jul_log(java.level("SEVERE"), java.string("failed at {0}"), java.ident("ex")))

  assert lsw.rewrite(unit) is unit


def test_explicit_config_wins_over_pyproject(java, tmp_path, monkeypatch):
  (tmp_path / "pyproject.toml").write_text("[tool.log_switcheroo]\nprecheck = false\n")
  monkeypatch.chdir(tmp_path)
  unit = java.unit(java.jul_log(java.level("SEVERE"), java.string("failed at {0}"), java.ident("ex")))

  assert lsw.rewrite(unit, RuntimeConfig(precheck=True)) is unit
