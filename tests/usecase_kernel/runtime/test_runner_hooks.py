from __future__ import annotations

from dataclasses import dataclass

import pytest

from usecase_kernel.model import Model
from usecase_kernel.observability.adapters.logging import MemoryLogSink
from usecase_kernel.runtime.errors import AmbiguousStepsError
from usecase_kernel.runtime.runner import ModelRunner
from usecase_kernel.runtime.step_to_be_run import StepToBeRun


@dataclass(frozen=True)
class Request:
    value: int


@dataclass(frozen=True)
class Response:
    value: int


def _echo_model() -> Model:
    model = Model()
    uc = model.new_use_case("Echo")
    uc.new_flowless_step("Answer", message_type=Request, handler=lambda m: Response(m.value))
    return model


def test_handle_with_wraps_step_invocation() -> None:
    seen: list[tuple[str, object]] = []

    def handler(step_to_be_run: StepToBeRun) -> object | None:
        seen.append((step_to_be_run.step.name, step_to_be_run.message))
        return step_to_be_run.run()

    runner = ModelRunner().run(_echo_model()).handle_with(handler)
    assert runner.react_to(Request(1)) == Response(1)
    assert seen == [("Answer", Request(1))]


def test_handle_with_can_skip_handler() -> None:
    runner = ModelRunner().run(_echo_model()).handle_with(lambda s: None)
    assert runner.react_to(Request(1)) is None
    assert runner.latest_step is not None


def test_publish_with_redirects_published_values() -> None:
    published: list[object] = []
    runner = ModelRunner().run(_echo_model()).publish_with(published.append)
    result = runner.react_to(Request(2))
    assert published == [Response(2)]
    assert result == Response(2)


def test_publish_with_may_react_again() -> None:
    # A custom publisher calling back into react_to is processed inline.
    log: list[int] = []
    model = _echo_model()
    model.find_use_case("Echo").new_flowless_step("Log", message_type=Response, handler=lambda m: log.append(m.value))
    runner = ModelRunner().run(model)
    runner.publish_with(lambda value: runner.react_to(value))
    runner.react_to(Request(3))
    assert log == [3]


def test_unhandled_default_is_noop() -> None:
    runner = ModelRunner().run(_echo_model())
    assert runner.react_to(Response(1)) is None
    assert runner.latest_step is None


def test_not_running_runner_ignores_messages() -> None:
    sink = MemoryLogSink()
    runner = ModelRunner(log_sink=sink)
    assert runner.react_to(Request(1)) is None
    runner.run(_echo_model())
    runner.stop()
    assert not runner.is_running
    assert runner.react_to(Request(1)) is None
    assert runner.latest_step is None
    assert "runner is not running, messages ignored" in sink.texts("warning")


def test_stop_from_handler_skips_remaining_messages() -> None:
    log: list[int] = []
    model = Model()
    runner = ModelRunner()

    def handle(msg: Request) -> None:
        log.append(msg.value)
        runner.stop()

    model.new_use_case("UC").new_flowless_step("Stop", message_type=Request, handler=handle)
    runner.run(model)
    runner.react_to(Request(1), Request(2))
    assert log == [1]


def test_can_react_to_reflects_eligibility() -> None:
    model = Model()
    uc = model.new_use_case("UC")
    first = uc.new_interruptable_flow_step("S1", uc.basic_flow, message_type=Request, handler=lambda m: None)
    second = uc.new_interruptable_flow_step("S2", uc.basic_flow, message_type=Response, handler=lambda m: None)
    runner = ModelRunner()
    assert not runner.can_react_to(Request)
    runner.run(model)
    assert runner.can_react_to(Request)
    assert not runner.can_react_to(Response)
    runner.react_to(Request(1))
    assert runner.steps_that_can_react_to(Response) == [second]
    assert runner.steps_that_can_react_to(Request) == [first]


def test_recording_captures_triggering_messages() -> None:
    runner = ModelRunner().run(_echo_model())
    runner.react_to(Request(0))
    runner.start_recording()
    runner.react_to(Request(1), Response(9))
    runner.stop_recording()
    runner.react_to(Request(2))
    # Response(1) is published by the cascade but no step handles it.
    assert runner.recorded_messages == (Request(1),)


def test_recording_skips_messages_of_failed_steps() -> None:
    model = Model()
    uc = model.new_use_case("Echo")
    uc.new_flowless_step("Answer", message_type=Request, handler=lambda m: 1 / 0)
    uc.new_flowless_step("Recover", message_type=ZeroDivisionError, handler=lambda m: None)
    runner = ModelRunner().run(model).start_recording()
    runner.react_to(Request(1))
    assert [type(m) for m in runner.recorded_messages] == [ZeroDivisionError]



def test_ambiguity_error_mode_raises() -> None:
    model = Model()
    model.new_use_case("UC1").new_flowless_step("A", message_type=Request, handler=lambda m: None)
    model.new_use_case("UC2").new_flowless_step("B", message_type=Request, handler=lambda m: None)
    runner = ModelRunner(ambiguity="error").run(model)
    with pytest.raises(AmbiguousStepsError) as excinfo:
        runner.react_to(Request(1))
    assert [step.name for step in excinfo.value.steps] == ["A", "B"]
    assert runner.latest_step is None


def test_ambiguity_default_mode_logs_warning() -> None:
    sink = MemoryLogSink()
    model = Model()
    model.new_use_case("UC1").new_flowless_step("A", message_type=Request, handler=lambda m: None)
    model.new_use_case("UC2").new_flowless_step("B", message_type=Request, handler=lambda m: None)
    runner = ModelRunner(log_sink=sink).run(model)
    runner.react_to(Request(1))
    warning = [m for m in sink.messages if m.level == "warning"]
    assert warning[0].fields["steps"] == ["UC1/A", "UC2/B"]


def test_invalid_runner_options_fail_fast() -> None:
    with pytest.raises(ValueError):
        ModelRunner(ambiguity="random")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        ModelRunner(log_level="trace")  # type: ignore[arg-type]


def test_log_level_filters_messages() -> None:
    sink = MemoryLogSink()
    runner = ModelRunner(log_sink=sink, log_level="debug").run(_echo_model())
    runner.react_to(Request(1))
    texts = sink.texts()
    assert "run started" in texts
    assert "step executed" in texts
    assert "unhandled message" in texts

    quiet = MemoryLogSink()
    ModelRunner(log_sink=quiet, log_level="warning").run(_echo_model()).react_to(Request(1))
    assert quiet.messages == []
