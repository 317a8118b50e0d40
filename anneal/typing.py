from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias, TypeVar, Union

import numpy as np

if TYPE_CHECKING:
    from anneal.state import State


S = TypeVar("S", bound="State")

SEED_TYPE: TypeAlias = Union[int, None]
RNG_TYPE: TypeAlias = Union[np.random.Generator, None]
