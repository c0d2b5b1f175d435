from __future__ import annotations

from usecase_kernel.model import Model
from usecase_kernel.observability.adapters.tracing import MemoryTraceSink
from usecase_kernel.runtime.runner import ModelRunner
from usecase_kernel.runtime.tracing import TracingObserver


class Ping:
    pass


class Pong:
    pass


def _model() -> Model:
    model = Model()
    uc = model.new_use_case("UC1")
    uc.new_interruptable_flow_step("S1", uc.basic_flow, message_type=Ping, handler=lambda m: Pong())
    uc.new_flowless_step("Catch", message_type=Pong, handler=lambda m: None)
    return model


def test_tracing_records_each_step_including_cascade() -> None:
    sink = MemoryTraceSink()
    runner = ModelRunner(observers=[TracingObserver(sink=sink)]).run(_model())
    runner.react_to(Ping())
    assert [r.step for r in sink.records] == ["S1", "Catch"]
    first, second = sink.records
    assert first.flow == "Basic flow"
    assert first.published_type == "Pong"
    assert first.status == "ok"
    assert second.flow is None
    assert second.message_type == "Pong"
    assert first.trace_id != second.trace_id
    assert first.duration_ms >= 0.0


def test_tracing_records_failed_step() -> None:
    sink = MemoryTraceSink()
    model = Model()
    model.new_use_case("UC1").new_flowless_step("Boom", message_type=Ping, handler=lambda m: 1 / 0)
    model.find_use_case("UC1").new_flowless_step("Recover", message_type=ArithmeticError, handler=lambda m: None)
    runner = ModelRunner().run(model).add_observer(TracingObserver(sink=sink))
    runner.react_to(Ping())
    assert [(r.step, r.status) for r in sink.records] == [("Boom", "error"), ("Recover", "ok")]
    error = sink.records[0].error
    assert error is not None
    assert error.type == "ZeroDivisionError"
    assert error.where == "Boom"


def test_observer_sees_unhandled_and_run_end() -> None:
    events: list[str] = []

    class Recorder:
        def before_step(self, *, step, message):
            events.append(f"before:{step.name}")
            return None

        def after_step(self, *, step, message, published, state):
            events.append(f"after:{step.name}")

        def on_step_error(self, *, step, message, error, state):
            events.append(f"error:{step.name}")

        def on_unhandled(self, *, message):
            events.append(f"unhandled:{type(message).__name__}")

        def on_run_end(self):
            events.append("end")

    runner = ModelRunner(observers=[Recorder()]).run(_model())
    runner.react_to(Pong(), Ping(), "no step for str")
    runner.stop()
    assert events == [
        "before:Catch",
        "after:Catch",
        "before:S1",
        "after:S1",
        "before:Catch",
        "after:Catch",
        "unhandled:str",
        "end",
    ]
