"""
Module containing configuration functions for Pytest.
"""

import os

import numpy as np
import pytest


@pytest.fixture
def single_precision(monkeypatch):
    """Switch the AD core and the Newton solver to single precision for one test.

    The precision is resolved once at import, and the modules hold their own
    references to the scalar type, so each of them is patched.

    """
    from poreprops.numerics import nonlinear, precision
    from poreprops.numerics.ad import forward_mode, functions, utils

    scalar_type, extremely_large = precision.resolve_precision("single")
    for module in (precision, forward_mode, functions, utils, nonlinear):
        monkeypatch.setattr(module, "SCALAR_TYPE", scalar_type)
    for module in (precision, nonlinear):
        monkeypatch.setattr(module, "EXTREMELY_LARGE", extremely_large)
    assert scalar_type is np.float32
    return scalar_type


@pytest.fixture(scope="session", autouse=True)
def cleanup_timing_log():
    """Remove the timing log written by an active logging configuration after the
    test session."""
    from poreprops.utils.logging import log_file, logger_is_active

    yield  # Let the tests run first

    if logger_is_active and os.path.isfile(log_file):
        try:
            os.remove(log_file)
            print(f"Deleted: {log_file}")
        except OSError as e:
            print(f"Error deleting file {log_file}: {e}")
