""" Timing logs for poreprops.

Logging is controlled by the configuration file poreprops.cfg, which should be
placed in the current working directory (where the python script is initiated).
All timing-related information is located in a section in the cfg-file with
heading logging; see sample file below.

By default, timing logs are switched off. They can be turned on by setting the keyword
'active' to True.

Only coarse-grained functions are decorated: writing a single log record costs on the
order of 1e-5 seconds, which is much more than an arithmetic operation on an
Evaluation. Decorated functions are classified in the following (overlapping)
categories

    all: Used to log all decorated functions.
    material: Component properties, binary coefficients, fluid systems.
    numerics: Nonlinear solvers.

Example logging section of poreprops.cfg:

    [logging]
    # Activate logging. Without this, the rest of the section has no effect
    active: True
    # To only log specific sections, use e.g.
    sections: numerics
    # multiple sections are separated by commas:
    sections: numerics, material
    # Name of the file the timings are written to
    file: PorePropsTimings.log

Other messages of the package are emitted through module level loggers
(``logging.getLogger(__name__)``) and are left to the application to configure.

"""
from __future__ import annotations

import functools
import logging
import time
from typing import Callable, Sequence

import poreprops as pp

__all__ = ["time_logger"]

# Try to access configuration information, as activated by the import of poreprops
try:
    config: dict = pp.config["logging"]
    raw_sections = config.get("sections", "all")
    active_sections = [s.strip().lower() for s in raw_sections.split(",")]
    logger_is_active = config.get("active", "false").strip().lower() == "true"
    log_file = config.get("file", "PorePropsTimings.log")
except KeyError:
    config = {}
    active_sections = ["all"]
    logger_is_active = False
    log_file = "PorePropsTimings.log"

always_log = "all" in active_sections

t_logger = logging.getLogger("Timer")
t_logger.setLevel(logging.INFO)

if logger_is_active and not t_logger.hasHandlers():
    # Add handler to write to file.
    time_handler = logging.FileHandler(log_file)
    time_handler.setLevel(logging.INFO)
    time_formatter = logging.Formatter("%(message)s")
    time_handler.setFormatter(time_formatter)
    t_logger.addHandler(time_handler)


def time_logger(sections: Sequence[str]) -> Callable[[Callable], Callable]:
    """A decorator that measures ellapsed time for a function.

    Parameters:
        sections: Logging categories the decorated function belongs to.

    """

    def inner_func(func):
        @functools.wraps(func)
        def log_time(*args, **kwargs):
            if not logger_is_active:
                # Shortcut if logging is not activated.
                return func(*args, **kwargs)
            elif always_log or any([s in active_sections for s in sections]):
                name = f"{func.__qualname__} in module {func.__module__}."

                t_logger.log(level=logging.INFO, msg=f"Calling {name}")

                start_time = time.perf_counter()
                value = func(*args, **kwargs)
                run_time = time.perf_counter() - start_time

                t_logger.log(
                    level=logging.INFO,
                    msg=f"Finished {name} Elapsed time: {run_time:.8f} s",
                )
                return value
            else:
                return func(*args, **kwargs)

        return log_time

    return inner_func
