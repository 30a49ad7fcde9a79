import argparse
import curses
import queue
import sys

from petcli.interfaces.tui.app import App
from petcli.interfaces.tui.data import Event
from petcli.interfaces.tui.poller import EVENT_QUEUE_SIZE, InputPoller, PollerError, StdinKeySource
from petcli.interfaces.tui.view import AppView
from petcli.storage import Store
from petcli.util.logger import setup_logger

logger = setup_logger("petcli", is_stream=False, is_file=True)

# how many missed ticks before a silent poller is treated as dead
POLLER_GRACE_TICKS = 5


def next_event(events: "queue.Queue[Event]", poller: InputPoller) -> Event:
    """Block until the next event; raise if the poller thread has died."""
    while True:
        try:
            return events.get(timeout=poller.tick_interval * POLLER_GRACE_TICKS)
        except queue.Empty:
            if not poller.is_alive():
                _msg = f"Input poller stopped unexpectedly: {poller.error!r}"
                raise PollerError(_msg) from poller.error


def main(stdscr: curses.window, store: Store, tick_interval: float) -> int:
    app = App(store)
    view = AppView(stdscr, app.state)
    view.init_curses()

    events: queue.Queue[Event] = queue.Queue(maxsize=EVENT_QUEUE_SIZE)
    poller = InputPoller(StdinKeySource(sys.stdin.fileno()), events, tick_interval)
    poller.start()
    try:
        while True:
            view.draw(app.snapshot())
            if not app.handle_event(next_event(events, poller)):
                break
    finally:
        poller.stop()
        poller.join(timeout=poller.tick_interval * 2)
        view.restore()
    return 0


def run(store: Store, args: argparse.Namespace) -> int:
    logger.info(f"Starting TUI: data={store.data_path} tick={args.tick_ms}ms")
    return curses.wrapper(main, store, args.tick_ms / 1000)
