"""
Execution Context.

Per-run state handed to every visitor a recipe creates: the resolved
configuration, the trace recorder, and the run counters. A context is owned
by a single run over a single unit.
"""

from typing import Optional

from log_switcheroo.config import RuntimeConfig
from log_switcheroo.tracer import TraceLogger


class ExecutionContext:
  """
  Shared state for one recipe run.

  Attributes:
      config (RuntimeConfig): Active settings.
      tracer (TraceLogger): Event recorder; disabled when ``config.trace`` is off.
      rewrites (int): Number of call sites replaced so far.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None) -> None:
    self.config = config or RuntimeConfig()
    self.tracer = TraceLogger(enabled=self.config.trace)
    self.rewrites = 0

  def record_rewrite(self) -> None:
    self.rewrites += 1
