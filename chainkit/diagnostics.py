"""
Diagnostics - Per-run observability snapshot produced by a chain.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .handler import HandlerResult


@dataclass(frozen=True)
class HandlerDiagnostics:
    """Outcome of a single visited handler. Times are in seconds."""

    handler_name: str = ""
    execution_time: float = 0.0
    result: HandlerResult = HandlerResult.CONTINUE
    skipped: bool = False
    has_exception: bool = False
    exception_message: Optional[str] = None


@dataclass
class ChainDiagnostics:
    """
    Aggregate diagnostics for one chain run.

    Created fresh per run and handed to the diagnostics callback once,
    after the run finishes.
    """

    handlers: List[HandlerDiagnostics] = field(default_factory=list)
    total_execution_time: float = 0.0
    stopped_early: bool = False
    early_stop_reason: Optional[str] = None

    @property
    def executed(self):
        """Handlers that ran to completion without raising."""
        return [h for h in self.handlers if not h.skipped and not h.has_exception]

    @property
    def skipped(self):
        """Handlers whose guard evaluated to False."""
        return [h for h in self.handlers if h.skipped]

    @property
    def failed(self):
        """Handlers that raised an exception."""
        return [h for h in self.handlers if h.has_exception]


def format_diagnostics(diagnostics):
    """
    Render diagnostics as a human readable multi-line report.

    Args:
        diagnostics: ChainDiagnostics to format

    Returns:
        str report
    """
    if diagnostics is None:
        raise ValueError("diagnostics is required")

    lines = [
        f"Total execution time: {diagnostics.total_execution_time * 1000:.2f}ms",
        f"Handlers visited: {len(diagnostics.handlers)}",
    ]
    for h in diagnostics.handlers:
        if h.skipped:
            lines.append(f"  - {h.handler_name}: skipped")
        elif h.has_exception:
            lines.append(f"  - {h.handler_name}: {h.execution_time * 1000:.2f}ms "
                         f"(Exception: {h.exception_message})")
        else:
            lines.append(f"  - {h.handler_name}: {h.execution_time * 1000:.2f}ms "
                         f"(Result: {h.result.name})")
    if diagnostics.stopped_early:
        lines.append(f"Chain stopped early: {diagnostics.early_stop_reason}")
    return "\n".join(lines)
