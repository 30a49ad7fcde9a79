import contextlib
import curses
import os
import queue
import select
import threading
import time
from collections.abc import Callable
from typing import Protocol

from petcli.interfaces.tui.data import Event, KeyEvent, TickEvent
from petcli.util.logger import setup_logger

logger = setup_logger("petcli", is_stream=False, is_file=True)

DEFAULT_TICK_INTERVAL = 0.2
EVENT_QUEUE_SIZE = 64
ESC = 27

# ANSI cursor keys (CSI and SS3 forms) -> curses key codes
_ESCAPE_SEQUENCES: dict[bytes, int] = {
    b"\x1b[A": curses.KEY_UP,
    b"\x1b[B": curses.KEY_DOWN,
    b"\x1b[C": curses.KEY_RIGHT,
    b"\x1b[D": curses.KEY_LEFT,
    b"\x1bOA": curses.KEY_UP,
    b"\x1bOB": curses.KEY_DOWN,
    b"\x1bOC": curses.KEY_RIGHT,
    b"\x1bOD": curses.KEY_LEFT,
}

# longest first
_PARTIAL_PREFIXES = (b"\x1b[", b"\x1bO", b"\x1b")


class KeySource(Protocol):
    def read_keys(self, timeout: float) -> list[int]:
        """Block up to `timeout` seconds and return the keys read (maybe none)."""
        ...


def decode_keys(data: bytes) -> list[int]:
    """Decode raw terminal bytes into key codes.

    Cursor keys become curses.KEY_*, anything else becomes ord(ch).
    An unknown escape sequence is passed through byte by byte.
    """
    keys: list[int] = []
    i = 0
    while i < len(data):
        seq = data[i : i + 3]
        if seq in _ESCAPE_SEQUENCES:
            keys.append(_ESCAPE_SEQUENCES[seq])
            i += 3
            continue
        # utf-8 multibyte chars
        for length in (1, 2, 3, 4):
            try:
                ch = data[i : i + length].decode("utf-8")
            except UnicodeDecodeError:
                continue
            keys.append(ord(ch))
            i += length
            break
        else:
            keys.append(data[i])
            i += 1
    return keys


class KeyDecoder:
    """Stateful wrapper around decode_keys for chunked reads.

    A read that ends in the middle of a cursor key sequence (ESC, ESC [ or
    ESC O) keeps that tail back and decodes it together with the next chunk.
    """

    def __init__(self) -> None:
        self._pending = b""

    def feed(self, data: bytes) -> list[int]:
        data = self._pending + data
        self._pending = b""
        for prefix in _PARTIAL_PREFIXES:
            if data.endswith(prefix):
                self._pending = prefix
                data = data[: -len(prefix)]
                break
        return decode_keys(data)

    def flush(self) -> list[int]:
        """Give up waiting for the rest of a sequence and decode what is held."""
        data, self._pending = self._pending, b""
        return decode_keys(data)


class StdinKeySource:
    """Read key presses straight from the terminal fd.

    curses is never called from here so the drawing side stays single-threaded.
    """

    def __init__(self, fd: int) -> None:
        self.fd = fd
        self.decoder = KeyDecoder()

    def read_keys(self, timeout: float) -> list[int]:
        readable, _, _ = select.select([self.fd], [], [], max(0.0, timeout))
        if not readable:
            # nothing followed a held ESC, so it was a plain Esc press
            return self.decoder.flush()
        return self.decoder.feed(os.read(self.fd, 1024))


class PollerError(RuntimeError):
    """入力スレッドが異常終了した。"""


class InputPoller(threading.Thread):
    """Poll for key presses and emit one Tick per tick interval.

    Keys are forwarded as soon as they arrive. When a full interval passes,
    a Tick is sent and the interval restarts, so the consumer never waits
    longer than one interval for some event.

    Attributes:
        source: where key presses come from
        events: bounded FIFO shared with the render loop (this thread is its only producer)
        tick_interval: seconds between ticks
        error: exception that ended the thread, if any
    """

    def __init__(
        self,
        source: KeySource,
        events: "queue.Queue[Event]",
        tick_interval: float = DEFAULT_TICK_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(name="petcli-input", daemon=True)
        self.source = source
        self.events = events
        self.tick_interval = tick_interval
        self.clock = clock
        self.error: BaseException | None = None
        self._stop_event = threading.Event()
        self._last_tick = clock()

    def stop(self) -> None:
        self._stop_event.set()

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def run(self) -> None:
        logger.debug("Input poller started")
        self._last_tick = self.clock()
        try:
            while not self.stopped:
                self.step()
        except Exception as e:
            logger.exception("Error (input poller)")
            self.error = e
        logger.debug("Input poller stopped")

    def step(self) -> None:
        """Run one poll window: wait for keys, then send a Tick if it is due."""
        timeout = max(0.0, self.tick_interval - (self.clock() - self._last_tick))
        for key in self.source.read_keys(timeout):
            if not self._send_key(key):
                return

        if self.clock() - self._last_tick >= self.tick_interval:
            # a full queue already has a redraw pending, so the tick can go
            with contextlib.suppress(queue.Full):
                self.events.put_nowait(TickEvent())
            self._last_tick = self.clock()

    def _send_key(self, key: int) -> bool:
        while not self.stopped:
            try:
                self.events.put(KeyEvent(key), timeout=self.tick_interval)
            except queue.Full:
                continue
            return True
        return False
