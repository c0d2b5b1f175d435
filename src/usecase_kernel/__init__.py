# Model-driven execution kernel: use case models and the runner that dispatches messages to them.

from usecase_kernel.config import ConfigError, RunnerConfig, load_runner_config
from usecase_kernel.model import (
    ANYTIME,
    Condition,
    ElementAlreadyInModel,
    Flow,
    FlowlessStep,
    InterruptableFlowStep,
    InterruptingFlowStep,
    Model,
    NoSuchElementInModel,
    Step,
    UseCase,
    after,
    instead_of,
)
from usecase_kernel.runtime import (
    AmbiguousStepsError,
    DeliveryQueue,
    ModelRunner,
    StepToBeRun,
    build_runner,
)

__all__ = [
    "ANYTIME",
    "AmbiguousStepsError",
    "Condition",
    "ConfigError",
    "DeliveryQueue",
    "ElementAlreadyInModel",
    "Flow",
    "FlowlessStep",
    "InterruptableFlowStep",
    "InterruptingFlowStep",
    "Model",
    "ModelRunner",
    "NoSuchElementInModel",
    "RunnerConfig",
    "Step",
    "StepToBeRun",
    "UseCase",
    "after",
    "build_runner",
    "instead_of",
    "load_runner_config",
]
