from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from threading import RLock
from typing import Literal

from usecase_kernel.model.flow import Flow
from usecase_kernel.model.model import Model
from usecase_kernel.model.step import FlowlessStep, Step
from usecase_kernel.observability.adapters.logging import LogSink
from usecase_kernel.observability.domain.logging import LOG_LEVELS, LogLevel, LogMessage, level_enabled
from usecase_kernel.runtime.eligibility import eligible_steps
from usecase_kernel.runtime.errors import AmbiguousStepsError
from usecase_kernel.runtime.observer import RunnerObserver
from usecase_kernel.runtime.run_state import RunState
from usecase_kernel.runtime.step_to_be_run import StepToBeRun, run_step

AmbiguityPolicy = Literal["first_declared", "error"]

StepHandler = Callable[[StepToBeRun], object | None]
UnhandledHandler = Callable[[object], None]
Publisher = Callable[[object], None]


@dataclass(slots=True)
class _Cascade:
    # Work list of one react_to call. Published values and routed errors jump the queue.
    work: deque[object]
    last_published: object | None = None
    # Steps that failed since the last success; a routed error never goes back to one of them.
    failed: list[Step] = field(default_factory=list)


class ModelRunner:
    """Runs a model: matches each incoming message to one eligible step and executes it.

    Messages are processed strictly in call order. A value returned by a step
    handler is handed to the publish hook, which by default feeds it back into
    the same ``react_to`` call before the next caller message is looked at.
    Handler errors are offered to the model as messages when a step for their
    type is eligible and has not already failed in the same error chain;
    otherwise they propagate to the caller unchanged.
    """

    def __init__(
        self,
        *,
        ambiguity: AmbiguityPolicy = "first_declared",
        log_sink: LogSink | None = None,
        log_level: LogLevel = "info",
        observers: Iterable[RunnerObserver] = (),
    ) -> None:
        if ambiguity not in ("first_declared", "error"):
            raise ValueError("ambiguity must be 'first_declared' or 'error'")
        if log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {list(LOG_LEVELS)}")
        self._ambiguity = ambiguity
        self._log_sink = log_sink
        self._log_level = log_level
        self._observers: list[RunnerObserver] = list(observers)
        self._state: RunState | None = None
        self._running = False
        # Re-entrant: publish hooks may call react_to from inside a dispatch.
        self._lock = RLock()
        self._cascades: list[_Cascade] = []
        self._step_handler: StepHandler = run_step
        self._unhandled_handler: UnhandledHandler = self._ignore_unhandled
        self._publisher: Publisher = self._publish_to_self
        self._recording = False
        self._recorded: list[object] = []

    def run(self, model: Model) -> ModelRunner:
        # Binds the model and starts from an empty history.
        with self._lock:
            self._state = RunState(model=model)
            self._running = True
            self._recorded.clear()
        self._log("info", "run started", use_cases=[uc.name for uc in model.use_cases], steps=len(model.steps))
        return self

    def stop(self) -> None:
        with self._lock:
            if not self._running:
                return
            self._running = False
        for observer in self._observers:
            observer.on_run_end()
        self._log("info", "run stopped")

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def model(self) -> Model | None:
        return None if self._state is None else self._state.model

    @property
    def latest_step(self) -> Step | None:
        return None if self._state is None else self._state.latest_step

    @property
    def latest_flow(self) -> Flow | None:
        step = self.latest_step
        if step is None or isinstance(step, FlowlessStep):
            return None
        return step.flow

    def handle_with(self, handler: StepHandler) -> ModelRunner:
        self._step_handler = handler
        return self

    def handle_unhandled_with(self, handler: UnhandledHandler) -> ModelRunner:
        self._unhandled_handler = handler
        return self

    def publish_with(self, publisher: Publisher) -> ModelRunner:
        self._publisher = publisher
        return self

    def add_observer(self, observer: RunnerObserver) -> ModelRunner:
        self._observers.append(observer)
        return self

    def start_recording(self) -> ModelRunner:
        with self._lock:
            self._recording = True
            self._recorded.clear()
        return self

    def stop_recording(self) -> None:
        self._recording = False

    @property
    def recorded_messages(self) -> tuple[object, ...]:
        # Messages whose step succeeded while recording, in dispatch order.
        return tuple(self._recorded)

    def steps_that_can_react_to(self, message_type: type) -> list[Step]:
        with self._lock:
            if not self._running or self._state is None:
                return []
            return eligible_steps(self._state, message_type)

    def can_react_to(self, message_type: type) -> bool:
        return bool(self.steps_that_can_react_to(message_type))

    def react_to(self, *messages: object) -> object | None:
        # Returns the last value published during this call (cascades included), or None.
        with self._lock:
            if not self._running or self._state is None:
                self._log("warning", "runner is not running, messages ignored", count=len(messages))
                return None
            cascade = _Cascade(work=deque(messages))
            self._cascades.append(cascade)
            try:
                while cascade.work and self._running:
                    self._dispatch(cascade.work.popleft(), cascade)
            finally:
                self._cascades.pop()
            return cascade.last_published

    def _dispatch(self, message: object, cascade: _Cascade) -> None:
        message_type = type(message)
        steps = eligible_steps(self._bound_state(), message_type)
        if not steps:
            self._log("debug", "unhandled message", message_type=message_type.__name__)
            for observer in self._observers:
                observer.on_unhandled(message=message)
            self._unhandled_handler(message)
            return
        if len(steps) > 1:
            if self._ambiguity == "error":
                raise AmbiguousStepsError(message, steps)
            self._log(
                "warning",
                "ambiguous steps, earliest declared wins",
                message_type=message_type.__name__,
                steps=[_step_label(step) for step in steps],
            )
        # eligible_steps preserves build order.
        self._execute(steps[0], message, cascade)

    def _execute(self, step: Step, message: object, cascade: _Cascade) -> None:
        observer_states = [observer.before_step(step=step, message=message) for observer in self._observers]
        try:
            published = self._step_handler(StepToBeRun(step=step, message=message))
        except Exception as exc:
            for observer, state in zip(self._observers, observer_states):
                observer.on_step_error(step=step, message=message, error=exc, state=state)
            cascade.failed.append(step)
            targets = eligible_steps(self._bound_state(), type(exc))
            if exc is message or not targets or any(targets[0] is failed for failed in cascade.failed):
                self._log("error", "step failed, error propagated", step=_step_label(step), error=repr(exc))
                raise
            self._log("info", "step failed, error routed to model", step=_step_label(step), error=repr(exc))
            cascade.work.appendleft(exc)
            return

        # History only advances on success.
        self._state = self._bound_state().advance(step)
        cascade.failed.clear()
        if self._recording:
            self._recorded.append(message)
        for observer, state in zip(self._observers, observer_states):
            observer.after_step(step=step, message=message, published=published, state=state)
        self._log("debug", "step executed", step=_step_label(step), message_type=type(message).__name__)
        if published is not None:
            for active in self._cascades:
                active.last_published = published
            self._publisher(published)

    def _bound_state(self) -> RunState:
        if self._state is None:
            raise RuntimeError("ModelRunner is not bound to a model; call run(model) first")
        return self._state

    def _publish_to_self(self, value: object) -> None:
        # Default publish hook: continue the active cascade depth-first.
        if self._cascades:
            self._cascades[-1].work.appendleft(value)
            return
        self.react_to(value)

    def _ignore_unhandled(self, message: object) -> None:
        return None

    def _log(self, level: LogLevel, message: str, **fields: object) -> None:
        if self._log_sink is None or not level_enabled(level, self._log_level):
            return
        self._log_sink.emit(LogMessage(level=level, message=message, fields=dict(fields)))


def _step_label(step: Step) -> str:
    return f"{step.use_case.name}/{step.name}"
