# coding: utf-8

# ====================================================
# imports
from __future__ import annotations

import pytest
import numpy as np

from attrs import define
from attrs import field


# ====================================================
# code
@define
class RingState:
    """Integer position on the ring {0, ..., size - 1}, with energy equal to the distance to <target>."""

    value: int
    rng: np.random.Generator = field(eq=False)
    size: int = 10
    target: int = 5

    def energy(self) -> float:
        return float(abs(self.value - self.target))

    def neighbor(self) -> RingState:
        step = 1 if self.rng.random() < 0.5 else -1
        return RingState((self.value + step) % self.size, self.rng, self.size, self.target)


@define
class Counter:
    energy: int = 0
    neighbor: int = 0


@define
class CountingState:
    """Ring state that records how many times each capability was called."""

    value: int
    rng: np.random.Generator = field(eq=False)
    counter: Counter

    def energy(self) -> float:
        self.counter.energy += 1
        return float(abs(self.value - 5))

    def neighbor(self) -> CountingState:
        self.counter.neighbor += 1
        step = 1 if self.rng.random() < 0.5 else -1
        return CountingState((self.value + step) % 10, self.rng, self.counter)


@define
class ConstantState:
    """State whose neighbors all share the same energy."""

    value: int = 0
    level: float = 3.0

    def energy(self) -> float:
        return self.level

    def neighbor(self) -> ConstantState:
        return ConstantState(self.value + 1, self.level)


@define
class ClimbingState:
    """State whose only neighbor is strictly worse."""

    value: int = 1

    def energy(self) -> float:
        return float(self.value)

    def neighbor(self) -> ClimbingState:
        return ClimbingState(self.value + 1)


@define
class FailingState:
    """State whose neighbors cannot be evaluated."""

    value: int = 1

    def energy(self) -> float:
        if self.value > 1:
            raise RuntimeError("cannot evaluate")

        return float(self.value)

    def neighbor(self) -> FailingState:
        return FailingState(self.value + 1)


@pytest.fixture
def ring_state():
    return RingState(0, np.random.default_rng(42))


@pytest.fixture
def counting_state():
    return CountingState(0, np.random.default_rng(42), Counter())
