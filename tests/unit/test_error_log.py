"""
Unit tests for ErrorLog.
"""

from hypothesis import given
from hypothesis import strategies as st

from cpa005.core.error_log import ErrorLog


class TestErrorLog:
    """Tests for ErrorLog"""

    def test_new_log_is_empty(self):
        log = ErrorLog()
        assert log.is_empty()
        assert len(log) == 0
        assert log.as_text() == ""

    def test_write_keeps_insertion_order_and_duplicates(self):
        log = ErrorLog()
        log.write("first")
        log.write("second")
        log.write("first")

        assert not log.is_empty()
        assert log.messages == ["first", "second", "first"]
        assert log.as_text() == "first\nsecond\nfirst"

    def test_merge_appends_after_existing(self):
        parent = ErrorLog(["a"])
        child = ErrorLog(["b", "c"])

        parent.merge(child)

        assert parent.messages == ["a", "b", "c"]
        # The merged log is left untouched
        assert child.messages == ["b", "c"]

    def test_messages_is_a_copy(self):
        log = ErrorLog(["a"])
        log.messages.append("b")
        assert log.messages == ["a"]

    @given(st.lists(st.text()), st.lists(st.text()))
    def test_property_merge_concatenates(self, left, right):
        """Property test: merge is list concatenation"""
        log = ErrorLog(left)
        log.merge(ErrorLog(right))
        assert log.messages == left + right
        assert list(log) == left + right
