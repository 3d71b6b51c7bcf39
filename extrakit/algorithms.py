"""Small container algorithms: membership and splitting into runs."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar

T = TypeVar("T")
F = TypeVar("F", bound=Callable[[list[Any]], Any])


def contains(container: Iterable[Any], value: Any) -> bool:
    """Return whether *value* is in *container*.

    Mappings and sets are searched by key; other iterables element by element.
    """
    return value in container


def split_runs(items: Iterable[T], pred: Callable[[T], bool]) -> Iterator[list[T]]:
    """Yield the non-empty runs of *items* separated by elements matching *pred*."""
    run: list[T] = []
    for item in items:
        if pred(item):
            if run:
                yield run
            run = []
        else:
            run.append(item)
    if run:
        yield run


def filter_reduce(items: Iterable[T], pred: Callable[[T], bool], action: F) -> F:
    """Call *action* with each non-empty run between separators; return *action*."""
    for run in split_runs(items, pred):
        action(run)
    return action