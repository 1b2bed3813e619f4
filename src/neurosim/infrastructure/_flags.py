"""
Execution flags for the NeuroSim executor.

We centralize the definition of flags here so that the executor and any
surrounding tooling agree on their values.

Flags are read from the `NEUROSIM_FLAGS` environment variable at import time
(see `defaults`) and can be overridden per `Executor` instance.
"""

from typing import Callable, Optional
import os


TRACE = 1 << 0
"""Log the rendered inputs, outputs and parameters of every step."""

DUMP = 1 << 1
"""Log the topological order before running the graph."""

_flagnames: dict[str, int] = {
    "dump": DUMP,
    "trace": TRACE,
}
"""Maps the lowercase name of the flag to its value."""


def from_environ(
    varname: str = "NEUROSIM_FLAGS",
    getenv: Callable[[str], Optional[str]] = os.getenv,
) -> int:
    """
    Read flags from a specific environment variable.

    The format for the flags is the following:

        <key>[,<key>,...]

    where <key> is the case-insensitive name of an existing flag. Unknown
    keys are ignored.

    For example:

        export NEUROSIM_FLAGS=trace,dump

    causes this function to return `TRACE|DUMP`.

    Parameters
    ----------
    varname:
        Name of the environment variable (default: `NEUROSIM_FLAGS`).
    getenv:
        Function used to read the environment variable (default: `os.getenv`).
    """
    flags: int = 0
    for value in (getenv(varname) or "").split(","):
        flags |= _flagnames.get(value.strip().lower(), 0)
    return flags


defaults = from_environ()
"""Default flags initialized from the `NEUROSIM_FLAGS` environment variable."""
