"""Global overflow policy. Decides what happens when an integer result, an integer constructor input or a
float-to-integer cast leaves the signed 64-bit range. "raise" raises Int64OverflowError, "saturate" clamps to the
nearest bound and logs a warning. The flag is read at call time, so it can be changed at runtime.
"""

OVERFLOW_POLICY: str = "raise"
