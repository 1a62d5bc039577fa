"""Unit tests for CheckerRegistry: ordering, removal, failures and validation."""

import logging
import threading

import pytest

from pagewarden.browser.checkers import Checker, CheckerRegistry, describe_checker
from pagewarden.exceptions import CheckerFailure, InvalidCheckerError


def _recorder(log: list, label: str):
    def checker(browser):
        log.append((label, browser))

    return checker


# ── add / run_all ─────────────────────────────────────────────────────────────


class TestRunAll:
    def setup_method(self):
        self.reg = CheckerRegistry()
        self.session = object()

    def test_runs_in_registration_order(self):
        log = []
        for label in ("c1", "c2", "c3"):
            self.reg.add(_recorder(log, label))

        self.reg.run_all(self.session)

        assert [label for label, _ in log] == ["c1", "c2", "c3"]

    def test_session_is_sole_argument(self):
        log = []
        self.reg.add(_recorder(log, "c"))

        self.reg.run_all(self.session)

        assert log == [("c", self.session)]

    def test_empty_registry_runs_nothing(self):
        self.reg.run_all(self.session)
        assert len(self.reg) == 0

    def test_duplicates_run_once_per_registration(self):
        log = []
        checker = _recorder(log, "dup")
        self.reg.add(checker)
        self.reg.add(checker)

        self.reg.run_all(self.session)

        assert len(log) == 2

    def test_callable_object_accepted(self):
        class PageChecker:
            def __init__(self):
                self.seen = []

            def __call__(self, browser):
                self.seen.append(browser)

        checker = PageChecker()
        self.reg.add(checker)
        self.reg.run_all(self.session)

        assert checker.seen == [self.session]
        assert isinstance(checker, Checker)

    def test_add_returns_checker_for_decorator_use(self):
        @self.reg.add
        def check(browser):
            pass

        assert check in self.reg

    def test_checker_added_during_run_waits_for_next_run(self):
        log = []

        def adds_another(browser):
            log.append("first")
            self.reg.add(lambda b: log.append("late"))

        self.reg.add(adds_another)
        self.reg.run_all(self.session)
        assert log == ["first"]

        self.reg.run_all(self.session)
        assert log == ["first", "first", "late"]


# ── remove ────────────────────────────────────────────────────────────────────


class TestRemove:
    def setup_method(self):
        self.reg = CheckerRegistry()

    def test_removed_checker_never_runs(self):
        log = []
        checker = _recorder(log, "c")
        self.reg.add(checker)
        self.reg.remove(checker)

        self.reg.run_all(object())

        assert log == []

    def test_remove_absent_is_noop(self):
        log = []
        kept = _recorder(log, "kept")
        self.reg.add(kept)

        self.reg.remove(_recorder(log, "never-added"))

        assert list(self.reg) == [kept]

    def test_remove_drops_all_duplicates(self):
        checker = _recorder([], "dup")
        self.reg.add(checker)
        self.reg.add(checker)

        self.reg.remove(checker)

        assert len(self.reg) == 0

    def test_remove_keeps_order_of_others(self):
        a, b, c = (_recorder([], label) for label in "abc")
        for checker in (a, b, c):
            self.reg.add(checker)

        self.reg.remove(b)

        assert list(self.reg) == [a, c]

    def test_clear(self):
        self.reg.add(_recorder([], "a"))
        self.reg.clear()
        assert len(self.reg) == 0


# ── failures and validation ───────────────────────────────────────────────────


class TestFailures:
    def setup_method(self):
        self.reg = CheckerRegistry()

    def test_failure_propagates_and_skips_remaining(self):
        log = []

        def failing(browser):
            raise CheckerFailure("server error banner")

        self.reg.add(_recorder(log, "before"))
        self.reg.add(failing)
        self.reg.add(_recorder(log, "after"))

        with pytest.raises(CheckerFailure, match="server error banner"):
            self.reg.run_all(object())

        assert [label for label, _ in log] == ["before"]

    def test_any_exception_type_propagates_unchanged(self):
        error = AssertionError("custom")

        def failing(browser):
            raise error

        self.reg.add(failing)

        with pytest.raises(AssertionError) as excinfo:
            self.reg.run_all(object())
        assert excinfo.value is error

    def test_failure_is_logged(self, caplog):
        def failing(browser):
            raise CheckerFailure("boom")

        self.reg.add(failing)

        with caplog.at_level(logging.WARNING, logger="pagewarden"):
            with pytest.raises(CheckerFailure):
                self.reg.run_all(object())

        assert "failing" in caplog.text

    def test_outcomes_logged_with_checker_name(self, caplog):
        def passing(browser):
            pass

        def failing(browser):
            raise CheckerFailure("boom")

        self.reg.add(passing)
        self.reg.add(failing)

        with caplog.at_level(logging.DEBUG, logger="pagewarden"):
            with pytest.raises(CheckerFailure):
                self.reg.run_all(object())

        outcomes = [(r.levelno, r.checker) for r in caplog.records if hasattr(r, "checker")]
        assert outcomes == [
            (logging.DEBUG, describe_checker(passing)),
            (logging.WARNING, describe_checker(failing)),
        ]

    @pytest.mark.parametrize("value", [None, 42, "not callable", ["list"]])
    def test_non_callable_rejected(self, value):
        with pytest.raises(InvalidCheckerError):
            self.reg.add(value)
        assert len(self.reg) == 0

    def test_invalid_checker_is_type_error(self):
        with pytest.raises(TypeError):
            self.reg.add(object())


# ── locking ───────────────────────────────────────────────────────────────────


class TestLocking:
    def setup_method(self):
        self.reg = CheckerRegistry()
        self.checker = _recorder([], "a")
        self.reg.add(self.checker)

    def _read_while_locked(self, read):
        results = []
        reader = threading.Thread(target=lambda: results.append(read()))

        with self.reg._lock:
            reader.start()
            reader.join(timeout=0.1)
            assert reader.is_alive()

        reader.join(timeout=5)
        return results

    def test_len_waits_for_lock(self):
        assert self._read_while_locked(lambda: len(self.reg)) == [1]

    def test_contains_waits_for_lock(self):
        assert self._read_while_locked(lambda: self.checker in self.reg) == [True]
