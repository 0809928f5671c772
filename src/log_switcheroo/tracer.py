"""
Rewrite Trace Logger.

Records the step-by-step decisions of a recipe run:
1. Lifecycle phases (Pre-check, Rewrite).
2. Signature matches (call site matched a known overload).
3. Tree mutations (call node A replaced by call node B).
4. Inspections (matched call left unchanged, with the reason).

The output is a list of event dictionaries suitable for JSON serialization.
"""

import time
import uuid
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class TraceEventType(str, Enum):
  PHASE_START = "phase_start"
  PHASE_END = "phase_end"
  MATCH_SIGNATURE = "match_signature"
  AST_MUTATION = "ast_mutation"
  INSPECTION = "inspection"


@dataclass
class TraceEvent:
  id: str
  type: TraceEventType
  timestamp: float
  description: str
  parent_id: Optional[str] = None
  metadata: Dict[str, Any] = field(default_factory=dict)


class TraceLogger:
  """
  Records rewrite events.

  One logger belongs to one `ExecutionContext`; it is not shared between
  units.
  """

  def __init__(self, enabled: bool = True) -> None:
    self.enabled = enabled
    self._events: List[TraceEvent] = []
    self._active_phases: List[str] = []

  def start_phase(self, name: str, description: str = "") -> str:
    """Starts a nested phase. Returns the phase ID."""
    phase_id = str(uuid.uuid4())
    if not self.enabled:
      return phase_id

    parent = self._active_phases[-1] if self._active_phases else None
    self._events.append(
      TraceEvent(
        id=phase_id,
        type=TraceEventType.PHASE_START,
        timestamp=time.time(),
        description=name,
        parent_id=parent,
        metadata={"detail": description},
      )
    )
    self._active_phases.append(phase_id)
    return phase_id

  def end_phase(self) -> None:
    if not self._active_phases:
      return

    phase_id = self._active_phases.pop()
    self._events.append(
      TraceEvent(
        id=str(uuid.uuid4()),
        type=TraceEventType.PHASE_END,
        timestamp=time.time(),
        description="End Phase",
        parent_id=phase_id,
      )
    )

  def log_match(self, call: str, pattern: str) -> None:
    """Logs a call site matching a signature pattern."""
    self._log_simple(TraceEventType.MATCH_SIGNATURE, f"Matched {call}", {"call": call, "pattern": pattern})

  def log_mutation(self, node_type: str, before: str, after: str) -> None:
    """Logs a node replacement."""
    self._log_simple(TraceEventType.AST_MUTATION, f"Transformed {node_type}", {"before": before, "after": after})

  def log_inspection(self, node_str: str, outcome: str, detail: str = "") -> None:
    """Logs a decision point where no change occurred."""
    self._log_simple(TraceEventType.INSPECTION, f"Inspecting '{node_str}'", {"outcome": outcome, "detail": detail})

  def _log_simple(self, evt_type: TraceEventType, desc: str, meta: Dict[str, Any]) -> None:
    if not self.enabled:
      return
    parent = self._active_phases[-1] if self._active_phases else None
    self._events.append(
      TraceEvent(
        id=str(uuid.uuid4()), type=evt_type, timestamp=time.time(), description=desc, parent_id=parent, metadata=meta
      )
    )

  def export(self) -> List[Dict[str, Any]]:
    """Returns list of dicts for JSON serialization."""
    return [asdict(e) for e in self._events]
