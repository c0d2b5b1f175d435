# Static model graph: use cases, flows, steps and their gating predicates.

from usecase_kernel.model.condition import Condition
from usecase_kernel.model.errors import ElementAlreadyInModel, ModelError, NoSuchElementInModel
from usecase_kernel.model.flow import Flow
from usecase_kernel.model.flow_position import ANYTIME, After, Anytime, FlowPosition, InsteadOf, after, instead_of
from usecase_kernel.model.model import Model
from usecase_kernel.model.step import (
    FlowlessStep,
    FlowStep,
    Handler,
    InterruptableFlowStep,
    InterruptingFlowStep,
    Step,
)
from usecase_kernel.model.use_case import BASIC_FLOW, UseCase

__all__ = [
    "ANYTIME",
    "BASIC_FLOW",
    "After",
    "Anytime",
    "Condition",
    "ElementAlreadyInModel",
    "Flow",
    "FlowPosition",
    "FlowStep",
    "FlowlessStep",
    "Handler",
    "InsteadOf",
    "InterruptableFlowStep",
    "InterruptingFlowStep",
    "Model",
    "ModelError",
    "NoSuchElementInModel",
    "Step",
    "UseCase",
    "after",
    "instead_of",
]
