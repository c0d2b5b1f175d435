from __future__ import annotations

import pytest

from usecase_kernel.model import ANYTIME, Condition, Model, after, instead_of
from usecase_kernel.model.condition import condition_holds


class Ping:
    pass


def _noop(msg: object) -> None:
    return None


def _flow_steps():
    use_case = Model().new_use_case("UC1")
    flow = use_case.basic_flow
    s1 = use_case.new_interruptable_flow_step("S1", flow, message_type=Ping, handler=_noop)
    s2 = use_case.new_interruptable_flow_step("S2", flow, message_type=Ping, handler=_noop)
    free = use_case.new_flowless_step("F", message_type=Ping, handler=_noop)
    return s1, s2, free


def test_condition_evaluates_predicate_each_time() -> None:
    state = {"open": False}
    cond = Condition(lambda: state["open"])
    assert cond.test() is False
    state["open"] = True
    assert cond.test() is True


def test_absent_condition_holds() -> None:
    assert condition_holds(None)
    assert not condition_holds(Condition(lambda: False))


def test_condition_requires_callable() -> None:
    with pytest.raises(TypeError):
        Condition(True)  # type: ignore[arg-type]


def test_anytime_holds_for_any_history() -> None:
    s1, _, _ = _flow_steps()
    assert ANYTIME.test(None)
    assert ANYTIME.test(s1)


def test_after_matches_latest_step_only() -> None:
    s1, s2, _ = _flow_steps()
    position = after(s1)
    assert position.test(s1)
    assert not position.test(s2)
    assert not position.test(None)


def test_after_multiple_anchors() -> None:
    s1, s2, free = _flow_steps()
    position = after(s1, s2)
    assert position.test(s1)
    assert position.test(s2)
    assert not position.test(free)


def test_after_nothing_holds_only_before_first_step() -> None:
    s1, _, _ = _flow_steps()
    position = after()
    assert position.test(None)
    assert not position.test(s1)


def test_instead_of_holds_where_anchor_would_run() -> None:
    s1, s2, _ = _flow_steps()
    assert instead_of(s2).test(s1)
    assert not instead_of(s2).test(s2)
    assert instead_of(s1).test(None)


def test_instead_of_rejects_flowless_anchor() -> None:
    _, _, free = _flow_steps()
    with pytest.raises(ValueError):
        instead_of(free)
