"""Tests for ProgressAdapter traversal across the three holding modes."""

import copy
from pathlib import Path
import pickle
import sys

import pytest

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tickbar.core.adapter import ProgressAdapter, ProgressCursor
from tickbar.core.holders import BorrowedConstHolder, BorrowedMutHolder, OwnedHolder
from tickbar.core.state import ProgressState
from tickbar.exceptions import (
    AdapterCopyError,
    ReadOnlySequenceError,
    SequenceResizedError,
    StaleCursorError,
)


def frames(sink):
    """Individual redraws written to a StringIO sink."""
    return sink.getvalue().split("\r")[1:]


def quiet_adapter(holder, sink, **kwargs):
    """Adapter that only redraws on its first and completing ticks."""
    return ProgressAdapter(holder, sink=sink, min_update_time=1000.0, **kwargs)


class TestTraversal:
    """Values pass through unchanged and every step ticks."""

    @pytest.mark.parametrize(
        "data",
        [[1, 2, 3], (4, 5, 6), "abc", range(4), [], [None, 0, ""]],
    )
    def test_values_unchanged(self, data, sink):
        holder = BorrowedConstHolder(data)
        assert list(quiet_adapter(holder, sink)) == list(data)

    @pytest.mark.parametrize("size", [1, 2, 7, 100])
    def test_done_ends_at_length(self, size, sink):
        bar = quiet_adapter(OwnedHolder(list(range(size))), sink)
        for _ in bar:
            pass
        assert bar.done == size
        assert "100.0%" in frames(sink)[-1]

    def test_five_element_owned_scenario(self, sink):
        """First and completing ticks redraw; the final frame is full."""
        bar = quiet_adapter(OwnedHolder([10, 20, 30, 40, 50]), sink, bar_size=10)
        seen = [value for value in bar]

        assert seen == [10, 20, 30, 40, 50]
        assert bar.done == 5
        assert bar.state.renders == 2
        first, last = frames(sink)
        assert first.startswith("{ 0.0%} [          ]")
        assert last.startswith("{100.0%} [##########]")

    def test_first_tick_renders_before_first_value(self, sink):
        bar = quiet_adapter(BorrowedConstHolder((1, 2, 3)), sink)
        cursor = iter(bar)
        assert isinstance(cursor, ProgressCursor)
        assert sink.getvalue() == ""
        assert next(cursor) == 1
        assert "{ 0.0%}" in sink.getvalue()

    def test_empty_sequence(self, sink):
        bar = quiet_adapter(BorrowedConstHolder([]), sink)
        assert list(bar) == []
        assert bar.done == 0
        assert bar.state.renders == 1

    def test_exhausted_cursor_stays_exhausted(self, sink):
        bar = quiet_adapter(BorrowedConstHolder((1,)), sink)
        cursor = iter(bar)
        assert next(cursor) == 1
        with pytest.raises(StopIteration):
            next(cursor)
        renders = bar.state.renders
        with pytest.raises(StopIteration):
            next(cursor)
        assert bar.state.renders == renders

    def test_early_break_counts_visited(self, sink):
        bar = quiet_adapter(BorrowedConstHolder(list(range(100))), sink)
        for value in bar:
            if value == 9:
                break
        assert bar.done == 10

    def test_second_traversal_restarts(self, sink):
        bar = quiet_adapter(BorrowedConstHolder((1, 2, 3)), sink)
        assert list(bar) == [1, 2, 3]
        assert list(bar) == [1, 2, 3]
        assert bar.done == 3

    def test_generator_with_explicit_total(self, sink):
        holder = OwnedHolder((x * x for x in range(4)), total=4)
        bar = quiet_adapter(holder, sink)
        assert list(bar) == [0, 1, 4, 9]
        assert "100.0%" in frames(sink)[-1]

    def test_generator_without_total_counts(self, sink):
        bar = quiet_adapter(OwnedHolder(x for x in range(4)), sink)
        assert list(bar) == [0, 1, 2, 3]
        assert bar.total is None
        assert frames(sink)[-1].startswith("{4 it}")


class TestSuffixAndForwarders:
    """append/<<, manual_set, advance, update and setters."""

    def test_suffix_shows_on_next_redraw(self, fake_timer, sink):
        state = ProgressState(min_update_time=0.5, sink=sink, timer=fake_timer)
        bar = ProgressAdapter(BorrowedConstHolder(["a", "b", "c"]), state=state)
        for value in bar:
            bar << f"<{value}>"
            fake_timer.advance(1.0)

        drawn = frames(sink)
        assert len(drawn) == 4
        assert drawn[0].rstrip().endswith(")")
        assert drawn[1].rstrip().endswith("<a>")
        assert drawn[2].rstrip().endswith("<b>")
        assert drawn[3].rstrip().endswith("<c>")
        assert state.suffix == ""

    def test_lshift_chains(self, sink):
        bar = quiet_adapter(BorrowedConstHolder((1,)), sink)
        bar << "a" << 1 << "b"
        assert bar.state.suffix == "a1b"
        assert bar.append("c") is bar

    def test_manual_set_and_advance(self, sink):
        bar = quiet_adapter(BorrowedConstHolder(list(range(10))), sink)
        iter(bar)
        bar.manual_set(0.5)
        assert bar.done == 5
        bar.advance(2)
        assert bar.done == 7
        bar.manual_set(1.5)
        assert bar.done == 10

    def test_update_ticks(self, sink):
        bar = quiet_adapter(BorrowedConstHolder(list(range(10))), sink)
        iter(bar)
        assert bar.update() is True
        assert bar.done == 1

    def test_configuration_setters(self, sink):
        bar = ProgressAdapter(BorrowedConstHolder((1,)), sink=sink)
        other = type(sink)()
        bar.set_prefix("p ")
        bar.set_bar_size(5)
        bar.set_min_update_time(2.0)
        bar.set_ostream(other)
        assert bar.state.prefix == "p "
        assert bar.state.bar_size == 5
        assert bar.state.min_update_time == 2.0
        assert bar.state.sink is other

        list(bar)
        assert other.getvalue().startswith("\rp {")
        assert sink.getvalue() == ""


class TestOwnership:
    """Mutable borrow, read-only borrow and owned copies."""

    def test_mutable_borrow_assign_writes_through(self, sink):
        data = [1, 2, 3]
        bar = quiet_adapter(BorrowedMutHolder(data), sink)
        for value in bar:
            bar.assign(value * 2)
        assert data == [2, 4, 6]

    def test_read_only_borrow_rejects_assign(self, sink):
        bar = quiet_adapter(BorrowedConstHolder((1, 2)), sink)
        for _ in bar:
            with pytest.raises(ReadOnlySequenceError):
                bar.assign(0)
            break

    def test_assign_before_first_value(self, sink):
        bar = quiet_adapter(BorrowedMutHolder([1]), sink)
        with pytest.raises(StaleCursorError):
            bar.assign(0)
        iter(bar)
        with pytest.raises(StaleCursorError):
            bar.assign(0)

    def test_owned_copy_unaffected_by_caller(self, sink):
        data = [1, 2, 3]
        bar = quiet_adapter(OwnedHolder(list(data)), sink)
        for value in bar:
            data.clear()
            bar.assign(value + 1)
        assert bar.holder.source == [2, 3, 4]
        assert data == []

    def test_resizing_borrowed_sequence_raises(self, sink):
        data = [1, 2, 3]
        bar = quiet_adapter(BorrowedMutHolder(data), sink)
        with pytest.raises(SequenceResizedError):
            for value in bar:
                data.append(value)

    def test_read_only_borrow_survives_source_deletion(self, sink):
        """Dropping the caller's name mid-loop changes nothing."""
        source = (7, 8, 9)
        bar = quiet_adapter(BorrowedConstHolder(source), sink)
        seen = []
        for value in bar:
            if value == 7:
                del source
            seen.append(value)
        assert seen == [7, 8, 9]
        assert "100.0%" in frames(sink)[-1]


class TestDuplicationGuards:
    """Adapters cannot be duplicated and stale cursors are rejected."""

    @pytest.mark.parametrize("duplicate", [copy.copy, copy.deepcopy, pickle.dumps])
    def test_copy_rejected(self, duplicate, sink):
        bar = quiet_adapter(BorrowedConstHolder((1, 2)), sink)
        with pytest.raises(AdapterCopyError):
            duplicate(bar)

    def test_copy_error_is_type_error(self, sink):
        bar = quiet_adapter(BorrowedConstHolder((1, 2)), sink)
        with pytest.raises(TypeError):
            copy.copy(bar)

    def test_restart_invalidates_old_cursor(self, sink):
        bar = quiet_adapter(BorrowedConstHolder((1, 2, 3)), sink)
        old = iter(bar)
        next(old)
        new = iter(bar)
        with pytest.raises(StaleCursorError):
            next(old)
        assert list(new) == [1, 2, 3]

    def test_repr(self, sink):
        bar = quiet_adapter(BorrowedConstHolder((1, 2)), sink)
        assert repr(bar) == "ProgressAdapter(BorrowedConstHolder(tuple), done=0, total=2)"
