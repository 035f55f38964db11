"""
Tests for jumplist: linear jump history with truncate-on-branch.
"""

from jumplist import JumpHistory, JumpRecord


def filled(*positions):
    history = JumpHistory()
    for p in positions:
        history.push("/a.c", p)
    return history


class TestPush:

    def test_empty(self):
        history = JumpHistory()
        assert history.pos == 0
        assert len(history) == 0
        assert history.current() is None

    def test_push_moves_pos(self):
        history = filled(1, 2, 3)
        assert history.pos == 3
        assert history.current() == JumpRecord("/a.c", 3)

    def test_push_after_back_truncates(self):
        history = filled(1, 2, 3, 4)
        history.step_back()
        history.step_back()
        history.push("/b.c", 9)
        assert history.records == [JumpRecord("/a.c", 1), JumpRecord("/a.c", 2), JumpRecord("/b.c", 9)]
        assert history.pos == 3

    def test_push_allows_duplicates(self):
        history = filled(1, 1)
        assert len(history) == 2


class TestRecordIfChanged:

    def test_identical_twice_stored_once(self):
        history = JumpHistory()
        assert history.record_if_changed("/a.c", 5)
        assert not history.record_if_changed("/a.c", 5)
        assert history.records == [JumpRecord("/a.c", 5)]
        assert history.pos == 1

    def test_different_position(self):
        history = JumpHistory()
        history.record_if_changed("/a.c", 5)
        history.record_if_changed("/a.c", 6)
        assert len(history) == 2

    def test_different_file(self):
        history = JumpHistory()
        history.record_if_changed("/a.c", 5)
        history.record_if_changed("/b.c", 5)
        assert len(history) == 2

    def test_unnamed_buffer(self):
        history = JumpHistory()
        history.record_if_changed(None, 0)
        history.record_if_changed(None, 0)
        assert history.records == [JumpRecord(None, 0)]

    def test_duplicate_still_drops_future(self):
        history = filled(1, 2, 3)
        history.step_back()
        history.step_back()
        assert not history.record_if_changed("/a.c", 1)
        assert history.records == [JumpRecord("/a.c", 1)]
        assert history.pos == 1


class TestSteps:

    def test_back(self):
        history = filled(1, 2, 3)
        assert history.step_back() == JumpRecord("/a.c", 2)
        assert history.step_back() == JumpRecord("/a.c", 1)
        assert history.pos == 1

    def test_back_stops_at_first(self):
        history = filled(1, 2)
        history.step_back()
        records = list(history.records)
        assert history.step_back() is None
        assert history.pos == 1
        assert history.records == records

    def test_back_on_empty(self):
        history = JumpHistory()
        assert history.step_back() is None
        assert history.pos == 0

    def test_forward_stops_at_end(self):
        history = filled(1, 2)
        assert history.step_forward() is None
        assert history.pos == 2
        assert len(history) == 2

    def test_back_then_forward(self):
        history = filled(1, 2, 3)
        history.step_back()
        history.step_back()
        assert history.step_forward() == JumpRecord("/a.c", 2)
        assert history.step_forward() == JumpRecord("/a.c", 3)
        assert history.step_forward() is None

    def test_pos_stays_in_range(self):
        history = filled(1, 2, 3)
        for _ in range(5):
            history.step_back()
            assert 0 <= history.pos <= len(history)
        for _ in range(5):
            history.step_forward()
            assert 0 <= history.pos <= len(history)
