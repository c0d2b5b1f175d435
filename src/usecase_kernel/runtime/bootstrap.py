from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from usecase_kernel.config.models import RunnerConfig
from usecase_kernel.model.model import Model
from usecase_kernel.observability.adapters.logging import JsonlLogSink, LogSink, StdoutLogSink
from usecase_kernel.observability.adapters.tracing import JsonlTraceSink, MemoryTraceSink, TraceSink
from usecase_kernel.runtime.runner import ModelRunner
from usecase_kernel.runtime.tracing import TracingObserver


@dataclass(slots=True)
class RunnerRuntime:
    # A configured runner plus the sinks it owns (closed together).
    runner: ModelRunner
    log_sink: LogSink | None = None
    trace_sink: TraceSink | None = None
    _closed: bool = field(default=False, repr=False)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.runner.stop()
        if self.trace_sink is not None:
            self.trace_sink.close()
        if isinstance(self.log_sink, JsonlLogSink):
            self.log_sink.close()


def build_runtime(config: RunnerConfig | None = None, *, model: Model | None = None) -> RunnerRuntime:
    # Composition root: config -> sinks -> observers -> runner (optionally already running).
    cfg = config if config is not None else RunnerConfig()
    log_sink = _build_log_sink(cfg)
    trace_sink = _build_trace_sink(cfg)
    runner = ModelRunner(
        ambiguity=cfg.ambiguity,
        log_sink=log_sink,
        log_level=cfg.logging.level,
        observers=[TracingObserver(sink=trace_sink)] if trace_sink is not None else [],
    )
    if model is not None:
        runner.run(model)
    if cfg.recording:
        runner.start_recording()
    return RunnerRuntime(runner=runner, log_sink=log_sink, trace_sink=trace_sink)


def build_runner(config: RunnerConfig | None = None, *, model: Model | None = None) -> ModelRunner:
    return build_runtime(config, model=model).runner


def _build_log_sink(config: RunnerConfig) -> LogSink | None:
    if config.logging.sink == "stdout":
        return StdoutLogSink()
    if config.logging.sink == "jsonl":
        # Presence of path is enforced by LoggingConfig.
        return JsonlLogSink(Path(str(config.logging.path)))
    return None


def _build_trace_sink(config: RunnerConfig) -> TraceSink | None:
    if not config.tracing.enabled:
        return None
    if config.tracing.path:
        return JsonlTraceSink(path=Path(config.tracing.path), flush_every_n=config.tracing.flush_every_n)
    return MemoryTraceSink()
