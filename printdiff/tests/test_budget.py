# printdiff/tests/test_budget.py
"""Tests for row budgets."""

from printdiff.budget import BudgetEnforcer
from printdiff.colors import DEFAULT_COLOR_SCHEME, NO_COLOR_SCHEME
from printdiff.config import DiffConfig
from printdiff.state import RenderState


def _enforcer(scheme=NO_COLOR_SCHEME, **options):
    state = RenderState()
    return BudgetEnforcer(DiffConfig(**options), scheme, state, 4), state


class TestGlobalBudget:
    """Tests for the max_chunks ceiling."""

    def test_marker_replaces_first_row_over_budget(self):
        budget, state = _enforcer(max_chunks=2)

        assert budget.emit("a")
        assert budget.emit("b")
        assert not budget.emit("c")

        assert budget.chunks == ["a", "b", "    ... (diff truncated)"]
        assert state.halted
        assert budget.halted

    def test_nothing_after_halt(self):
        budget, _ = _enforcer(max_chunks=1)
        budget.emit("a")
        budget.emit("b")

        assert not budget.emit("c")
        assert len(budget.chunks) == 2

    def test_zero_budget(self):
        budget, _ = _enforcer(max_chunks=0)

        assert not budget.emit("a")
        assert budget.chunks == ["    ... (diff truncated)"]

    def test_marker_takes_change_style(self):
        budget, _ = _enforcer(scheme=DEFAULT_COLOR_SCHEME, max_chunks=0)

        budget.emit("a", DEFAULT_COLOR_SCHEME.removed)

        assert budget.chunks == ["\x1b[31m    ... (diff truncated)\x1b[0m"]


class TestLineBudget:
    """Tests for the max_chunks_per_line ceiling."""

    def test_line_marker(self):
        budget, state = _enforcer(max_chunks_per_line=2)
        budget.begin_line()

        assert budget.emit_line_row("r1")
        assert budget.emit_line_row("r2")
        assert not budget.emit_line_row("r3")
        assert not budget.emit_line_row("r4")

        assert budget.chunks == ["r1", "r2", "    ... (line truncated)"]
        assert not state.halted

    def test_next_line_starts_fresh(self):
        budget, _ = _enforcer(max_chunks_per_line=1)
        budget.begin_line()
        budget.emit_line_row("r1")
        budget.emit_line_row("r2")

        budget.begin_line()

        assert budget.emit_line_row("r3")
        assert budget.chunks[-1] == "r3"

    def test_global_budget_wins_over_line_marker(self):
        budget, state = _enforcer(max_chunks=2, max_chunks_per_line=1)
        budget.emit("a")
        budget.begin_line()
        budget.emit_line_row("b")

        assert not budget.emit_line_row("c")

        assert budget.chunks == ["a", "b", "    ... (diff truncated)"]
        assert state.halted
