import json
import os
import queue
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import pytest

from petcli.interfaces import cli
from petcli.interfaces.tui import endpoint
from petcli.interfaces.tui.data import KeyEvent, TickEvent
from petcli.interfaces.tui.poller import PollerError


def _poller(*, alive: bool, error: BaseException | None = None) -> mock.Mock:
    poller = mock.Mock(tick_interval=0.001, error=error)
    poller.is_alive.return_value = alive
    return poller


class TestNextEvent(unittest.TestCase):
    """イベント待ちのテスト"""

    def test_returns_queued_event(self) -> None:
        events: queue.Queue = queue.Queue()
        events.put(KeyEvent(ord("j")))
        assert endpoint.next_event(events, _poller(alive=True)) == KeyEvent(ord("j"))

    def test_dead_poller_raises_with_cause(self) -> None:
        error = OSError("tty gone")
        with pytest.raises(PollerError) as exc:
            endpoint.next_event(queue.Queue(), _poller(alive=False, error=error))
        assert exc.value.__cause__ is error
        assert "tty gone" in str(exc.value)

    def test_keeps_waiting_while_poller_alive(self) -> None:
        poller = _poller(alive=True)
        poller.is_alive.side_effect = [True, True, False]
        with pytest.raises(PollerError):
            endpoint.next_event(queue.Queue(), poller)
        assert poller.is_alive.call_count == 3


class TestMainLoop(unittest.TestCase):
    """メインループの後始末のテスト"""

    def setUp(self) -> None:
        patches = {
            "app_cls": mock.patch.object(endpoint, "App"),
            "view_cls": mock.patch.object(endpoint, "AppView"),
            "poller_cls": mock.patch.object(endpoint, "InputPoller"),
            "source_cls": mock.patch.object(endpoint, "StdinKeySource"),
            "next_event": mock.patch.object(endpoint, "next_event", return_value=TickEvent()),
            "stdin": mock.patch("sys.stdin"),
        }
        self.mocks = {name: p.start() for name, p in patches.items()}
        for p in patches.values():
            self.addCleanup(p.stop)
        self.app = self.mocks["app_cls"].return_value
        self.view = self.mocks["view_cls"].return_value
        self.poller = self.mocks["poller_cls"].return_value
        self.poller.tick_interval = 0.01

    def _assert_cleaned_up(self) -> None:
        self.poller.start.assert_called_once_with()
        self.poller.stop.assert_called_once_with()
        self.poller.join.assert_called_once()
        self.view.restore.assert_called_once_with()

    def test_quit_cleans_up(self) -> None:
        self.app.handle_event.side_effect = [True, False]
        assert endpoint.main(mock.Mock(), mock.Mock(), 0.01) == 0
        assert self.view.draw.call_count == 2
        self.view.init_curses.assert_called_once_with()
        self._assert_cleaned_up()

    def test_exception_still_cleans_up(self) -> None:
        self.app.handle_event.side_effect = RuntimeError("boom")
        with pytest.raises(RuntimeError, match="boom"):
            endpoint.main(mock.Mock(), mock.Mock(), 0.01)
        self._assert_cleaned_up()

    def test_dead_poller_cleans_up(self) -> None:
        self.mocks["next_event"].side_effect = PollerError("Input poller stopped unexpectedly")
        with pytest.raises(PollerError):
            endpoint.main(mock.Mock(), mock.Mock(), 0.01)
        self.app.handle_event.assert_not_called()
        self._assert_cleaned_up()


class TestCliMain(unittest.TestCase):
    """コマンドライン入口のテスト"""

    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        env = mock.patch.dict(os.environ)
        env.start()
        self.addCleanup(env.stop)
        os.environ.pop("PC_DATA_PATH", None)
        os.environ.pop("PC_TICK_MS", None)

    def tearDown(self) -> None:
        self.temp_dir.cleanup()

    def test_unknown_extension_exits_2(self) -> None:
        with mock.patch.object(endpoint, "run") as run:
            assert cli.main(["--data-path", "x.txt"]) == 2
        run.assert_not_called()

    def test_creates_data_file_before_run(self) -> None:
        path = Path(self.temp_dir.name) / "sub" / "db.json"
        seen: list[object] = []

        def fake_run(store, args) -> int:
            seen.append(json.loads(path.read_text(encoding="utf-8")))
            assert store.data_path == path.as_posix()
            assert args.tick_ms == 200
            return 0

        with mock.patch.object(endpoint, "run", side_effect=fake_run) as run:
            assert cli.main(["--data-path", path.as_posix()]) == 0
        run.assert_called_once()
        assert seen == [[]]

    def test_existing_data_file_is_kept(self) -> None:
        path = Path(self.temp_dir.name) / "db.json"
        path.write_text("[]", encoding="utf-8")
        with mock.patch.object(endpoint, "run", return_value=0):
            assert cli.main(["--data-path", path.as_posix(), "--tick-ms", "50"]) == 0
        assert path.read_text(encoding="utf-8") == "[]"

    def test_tick_ms_must_be_positive(self) -> None:
        with mock.patch.object(endpoint, "run") as run, pytest.raises(SystemExit) as exc:
            cli.main(["--data-path", "db.json", "--tick-ms", "0"])
        assert exc.value.code == 2
        run.assert_not_called()

    def test_bad_tick_ms_env_exits_2(self) -> None:
        os.environ["PC_TICK_MS"] = "fast"
        with mock.patch.object(endpoint, "run") as run:
            assert cli.main([]) == 2
        run.assert_not_called()


if __name__ == "__main__":
    unittest.main()
