import sys
import threading
import time

_SPINNER_FRAMES = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"
_FRAME_INTERVAL = 0.08

# Webhook workflows can take a while; show the wait once it passes this many seconds.
_SHOW_ELAPSED_AFTER = 3


class Spinner:
    """Shows `` AI is thinking...`` on the current line while a reply is pending.

    Usable as a context manager around the await. Long waits get an elapsed
    seconds counter appended to the label.
    """

    def __init__(self, prefix: str = "", label: str = " AI is thinking..."):
        self._prefix = prefix
        self._label = label
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._started_at = 0.0
        self._widest = 0

    def frame(self, tick: int, elapsed: float) -> str:
        text = self._prefix + _SPINNER_FRAMES[tick % len(_SPINNER_FRAMES)] + self._label
        if elapsed >= _SHOW_ELAPSED_AFTER:
            text += f" ({int(elapsed)}s)"
        return text

    def start(self) -> None:
        self._started_at = time.monotonic()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        if self._stop.is_set():
            return
        self._stop.set()
        if self._thread:
            self._thread.join()
        width = max(self._widest, len(self._prefix) + 1 + len(self._label))
        sys.stdout.write("\r" + " " * width + "\r")
        sys.stdout.flush()

    def __enter__(self) -> "Spinner":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _run(self) -> None:
        tick = 0
        try:
            while not self._stop.is_set():
                text = self.frame(tick, time.monotonic() - self._started_at)
                self._widest = max(self._widest, len(text))
                sys.stdout.write("\r" + text)
                sys.stdout.flush()
                self._stop.wait(_FRAME_INTERVAL)
                tick += 1
        except (UnicodeEncodeError, OSError):
            pass  # terminal cannot draw the frames
