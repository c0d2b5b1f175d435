from __future__ import annotations

from typing import TypeVar

from usecase_kernel.model.errors import ElementAlreadyInModel, NoSuchElementInModel

T = TypeVar("T")


def save_element(kind: str, name: str, element: T, elements: dict[str, T]) -> T:
    # Names are unique per namespace; the mapping keeps insertion order.
    if not isinstance(name, str) or not name:
        raise ValueError(f"{kind} name must be a non-empty string")
    if name in elements:
        raise ElementAlreadyInModel(kind, name)
    elements[name] = element
    return element


def find_element(kind: str, name: str, elements: dict[str, T]) -> T:
    if name not in elements:
        raise NoSuchElementInModel(kind, name)
    return elements[name]
