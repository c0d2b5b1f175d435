from __future__ import annotations

from collections.abc import Callable
from queue import Empty, Queue
from threading import Lock, Thread

from usecase_kernel.observability.adapters.logging import LogSink
from usecase_kernel.observability.domain.logging import LogMessage
from usecase_kernel.runtime.runner import ModelRunner

ErrorCallback = Callable[[object, Exception], None]

_STOP = object()


class DeliveryQueue:
    """Delivers messages to a runner from one background worker thread.

    Every accepted message results in exactly one ``runner.react_to(message)``
    call, in submission order. The matcher itself is never parallelized.
    """

    def __init__(
        self,
        runner: ModelRunner,
        *,
        on_error: ErrorCallback | None = None,
        log_sink: LogSink | None = None,
        name: str = "usecase-kernel-delivery",
    ) -> None:
        self._runner = runner
        self._on_error = on_error if on_error is not None else self._log_error
        self._log_sink = log_sink
        self._name = name
        self._queue: Queue[object] = Queue()
        self._lock = Lock()
        self._thread: Thread | None = None
        self._accepting = False
        self.failures: list[tuple[object, Exception]] = []

    @property
    def is_accepting(self) -> bool:
        return self._accepting

    def start(self) -> DeliveryQueue:
        with self._lock:
            if self._thread is not None:
                raise RuntimeError("DeliveryQueue already started")
            self._thread = Thread(target=self._work, name=self._name, daemon=True)
            self._accepting = True
            self._thread.start()
        return self

    def submit(self, message: object) -> None:
        with self._lock:
            if not self._accepting:
                raise RuntimeError("DeliveryQueue is not accepting messages")
            self._queue.put(message)

    def join(self) -> None:
        # Blocks until every accepted message has been delivered.
        self._queue.join()

    def stop(self, *, drain: bool = True, timeout: float | None = None) -> None:
        with self._lock:
            if not self._accepting:
                return
            self._accepting = False
            if not drain:
                dropped = self._discard_pending()
                if dropped:
                    self._log("warning", "delivery stopped, pending messages dropped", dropped=dropped)
            self._queue.put(_STOP)
            thread = self._thread
        if thread is not None:
            thread.join(timeout)

    def _work(self) -> None:
        while True:
            message = self._queue.get()
            try:
                if message is _STOP:
                    return
                try:
                    self._runner.react_to(message)
                except Exception as exc:  # noqa: BLE001 - worker survives; failure goes to on_error
                    self._on_error(message, exc)
            finally:
                self._queue.task_done()

    def _discard_pending(self) -> int:
        dropped = 0
        while True:
            try:
                self._queue.get_nowait()
            except Empty:
                return dropped
            self._queue.task_done()
            dropped += 1

    def _log_error(self, message: object, error: Exception) -> None:
        self.failures.append((message, error))
        self._log("error", "delivery failed", message_type=type(message).__name__, error=repr(error))

    def _log(self, level: str, text: str, **fields: object) -> None:
        if self._log_sink is not None:
            self._log_sink.emit(LogMessage(level=level, message=text, fields=dict(fields)))
