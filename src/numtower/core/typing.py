from __future__ import annotations

from fractions import Fraction
from typing import Union

import numpy as np

from numtower.core.fraction import IntFraction

# Types accepted where a signed 64-bit integer is expected
IntegerLike = Union[
    int,
    np.integer,
]

# Types accepted where a binary64 float is expected
RealLike = Union[
    int,
    float,
    np.integer,
    np.floating,
]

# Native scalars that as_number lifts into the tower
NativeScalar = Union[
    int,
    float,
    complex,
    Fraction,
    IntFraction,
    np.integer,
    np.floating,
    np.complexfloating,
]
