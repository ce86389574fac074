# printdiff/state.py
"""Per-render counters shared by the render loop and its helpers."""

from dataclasses import dataclass


@dataclass
class RenderState:
    """Mutable state of one render call.

    Attributes:
        current_line: Upcoming line index in the first operand. Never decreases.
        last_emitted_line: Index of the last line shown, -1 before any.
        pending_post_context_line: First post-context line owed by the
            previous change, -1 when none is pending.
        total_chunks: Rows emitted so far.
        line_chunks: Rows emitted so far for the changed line in progress.
        halted: Set once the global row budget has tripped.
    """
    current_line: int = 0
    last_emitted_line: int = -1
    pending_post_context_line: int = -1
    total_chunks: int = 0
    line_chunks: int = 0
    halted: bool = False
