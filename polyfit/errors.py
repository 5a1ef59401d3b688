import numpy as np


class InvalidArgument(ValueError):
    """Input rejected before any matrix is built."""


def check_float_dtype(dtype) -> np.dtype:
    dtype = np.dtype(dtype)
    if not np.issubdtype(dtype, np.floating):
        raise InvalidArgument(f"Expects a floating point dtype, not {dtype}")
    return dtype
