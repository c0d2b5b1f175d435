# Runtime package: run state, eligibility, the model runner and its delivery queue.

from usecase_kernel.runtime.bootstrap import RunnerRuntime, build_runner, build_runtime
from usecase_kernel.runtime.delivery import DeliveryQueue
from usecase_kernel.runtime.eligibility import eligible_steps, is_interrupted, is_step_eligible
from usecase_kernel.runtime.errors import AmbiguousStepsError
from usecase_kernel.runtime.observer import RunnerObserver
from usecase_kernel.runtime.run_state import RunState
from usecase_kernel.runtime.runner import AmbiguityPolicy, ModelRunner
from usecase_kernel.runtime.step_to_be_run import StepToBeRun, run_step
from usecase_kernel.runtime.tracing import TracingObserver

__all__ = [
    "AmbiguityPolicy",
    "AmbiguousStepsError",
    "DeliveryQueue",
    "ModelRunner",
    "RunState",
    "RunnerRuntime",
    "RunnerObserver",
    "StepToBeRun",
    "TracingObserver",
    "build_runner",
    "build_runtime",
    "eligible_steps",
    "is_interrupted",
    "is_step_eligible",
    "run_step",
]
