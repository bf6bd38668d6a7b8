from __future__ import annotations

from abc import abstractmethod
from typing import Generic, TypeVar

import reactivex
from reactivex import operators as ops
from reactivex.subject import BehaviorSubject

T = TypeVar("T")


class ObservableProvider(Generic[T]):
    @abstractmethod
    def observable(self) -> reactivex.Observable[T]:
        raise NotImplementedError("")


class StaticStateProvider(ObservableProvider[T]):
    def __init__(self, state: T) -> None:
        self._state = state

    @property
    def state(self) -> T:
        return self._state

    def observable(self) -> reactivex.Observable[T]:
        return reactivex.just(self._state).pipe(ops.share())


class LatestValueProvider(ObservableProvider[T]):
    """Replays the most recent value to new subscribers and pushes updates."""

    def __init__(self, initial: T) -> None:
        self._subject: BehaviorSubject[T] = BehaviorSubject(initial)

    @property
    def value(self) -> T:
        return self._subject.value

    def publish(self, value: T) -> None:
        self._subject.on_next(value)

    def observable(self) -> reactivex.Observable[T]:
        return self._subject.pipe(ops.distinct_until_changed())
