"""
Tests for the Tracing System.
"""

from log_switcheroo.tracer import TraceEventType, TraceLogger


def test_phase_nesting():
  logger = TraceLogger()

  p1 = logger.start_phase("Parent")
  logger.start_phase("Child")
  logger.end_phase()
  logger.end_phase()

  events = logger.export()

  # Start P, Start C, End C, End P
  assert len(events) == 4
  assert events[0]["type"] == TraceEventType.PHASE_START
  assert events[1]["parent_id"] == p1
  assert events[2]["type"] == TraceEventType.PHASE_END


def test_events_attach_to_active_phase():
  logger = TraceLogger()
  phase = logger.start_phase("Rewrite")
  logger.log_match("logger.log(Level.INFO, \"a\", x)", "java.util.logging.Logger log(...)")
  logger.log_mutation("MethodInvocation", "before", "after")
  logger.log_inspection("call", "unchanged", "reason")

  events = logger.export()[1:]

  assert [e["type"] for e in events] == [
    TraceEventType.MATCH_SIGNATURE,
    TraceEventType.AST_MUTATION,
    TraceEventType.INSPECTION,
  ]
  assert all(e["parent_id"] == phase for e in events)
  assert events[1]["metadata"] == {"before": "before", "after": "after"}


def test_disabled_logger_records_nothing():
  logger = TraceLogger(enabled=False)
  logger.start_phase("x")
  logger.log_mutation("MethodInvocation", "a", "b")
  logger.end_phase()

  assert logger.export() == []


def test_end_phase_without_start_is_noop():
  logger = TraceLogger()
  logger.end_phase()
  assert logger.export() == []
