import numpy as np

"""Bounds of the signed 64-bit integers carried by Integer and Rational payloads"""

INT64_MIN: int = int(np.iinfo(np.int64).min)
INT64_MAX: int = int(np.iinfo(np.int64).max)

"""Values accepted by OVERFLOW_POLICY in numtower.core.flags"""
OVERFLOW_POLICIES: tuple[str, ...] = ("raise", "saturate")
