"""Backend management for the accelerated Fourier transforms in :mod:`matsubara`."""

from __future__ import annotations

import importlib
import os
from types import ModuleType
from typing import TYPE_CHECKING

import numpy

if TYPE_CHECKING:
    from matsubara.typing import Array

_BACKEND = os.environ.get("MATSUBARA_FFT_BACKEND", "scipy")

_MODULE_CACHE: dict[str, ModuleType] = {}
_BACKENDS: dict[str, str | None] = {
    "scipy": "scipy.fft",
    "numpy": "numpy.fft",
    "none": None,
}


def set_backend(backend: str) -> None:
    """Set the backend for the accelerated Fourier transforms.

    Args:
        backend: Name of the backend. Use ``"none"`` to disable acceleration.

    Notes:
        Transforms resolve the backend when their plan is built, so existing transforms are not
        affected by this call.
    """
    global _BACKEND  # noqa: PLW0603
    if backend not in _BACKENDS:
        raise ValueError(
            f"Invalid backend: {backend}. Available backends are: {list(_BACKENDS.keys())}"
        )
    _BACKEND = backend


def get_backend() -> str:
    """Get the name of the current backend."""
    return _BACKEND


def fft_supported() -> bool:
    """Check if the current backend can execute accelerated Fourier transforms."""
    return _load() is not None


def _load() -> ModuleType | None:
    """Load the module of the current backend."""
    if _BACKEND not in _BACKENDS:
        raise ValueError(
            f"Invalid backend: {_BACKEND}. Available backends are: {list(_BACKENDS.keys())}"
        )
    name = _BACKENDS[_BACKEND]
    if name is None:
        return None

    # Check the cache
    if name in _MODULE_CACHE:
        return _MODULE_CACHE[name]

    # Load the module
    try:
        module = importlib.import_module(name)
    except ImportError:
        return None
    _MODULE_CACHE[name] = module

    return module


class Plan:
    r"""Execution plan for an unnormalised discrete Fourier transform of a fixed size.

    Executing the plan computes

    .. math::
        y_k = \sum_{j=0}^{n-1} e^{\pm 2 \pi i k j / n} x_j,

    where the sign of the exponent is given by the direction, from the plan's input buffer
    :math:`x` into its output buffer :math:`y`. A plan constructed without a size is
    uninitialised, and signals that the naive transform should be used instead.
    """

    def __init__(self, size: int | None = None, direction: int = -1) -> None:
        """Initialise the plan.

        Args:
            size: Size of the transform. If `None`, the plan is left uninitialised.
            direction: Sign of the exponent, either ``-1`` or ``+1``.
        """
        self._size = size
        self._direction = direction
        self._module: ModuleType | None = None
        self._input: Array | None = None
        self._output: Array | None = None

        if size is None:
            return
        if size <= 0:
            raise ValueError(f"Plan size must be positive, got {size}.")
        if direction not in (-1, 1):
            raise ValueError(f"Plan direction must be -1 or +1, got {direction}.")

        self._module = _load()
        if self._module is not None:
            self._input = numpy.zeros(size, dtype=numpy.complex128)
            self._output = numpy.zeros(size, dtype=numpy.complex128)

    def is_initialized(self) -> bool:
        """Check if the plan can be executed."""
        return self._module is not None

    def input_buffer(self) -> Array:
        """Get the input buffer of the plan."""
        if self._input is None:
            raise RuntimeError("Plan has not been initialised.")
        return self._input

    def output_buffer(self) -> Array:
        """Get the output buffer of the plan."""
        if self._output is None:
            raise RuntimeError("Plan has not been initialised.")
        return self._output

    def execute(self) -> None:
        """Execute the plan, overwriting the output buffer."""
        if self._module is None:
            raise RuntimeError("Plan has not been initialised.")
        if self._direction == -1:
            self._output[:] = self._module.fft(self._input)
        else:
            self._output[:] = self._module.ifft(self._input, norm="forward")

    @property
    def size(self) -> int | None:
        """Get the size of the transform."""
        return self._size

    @property
    def direction(self) -> int:
        """Get the sign of the exponent."""
        return self._direction

    @property
    def backend(self) -> str | None:
        """Get the name of the module executing the plan."""
        return self._module.__name__ if self._module is not None else None


def make_plan(size: int, direction: int) -> Plan:
    """Make a plan for a transform of a given size and direction.

    Args:
        size: Size of the transform.
        direction: Sign of the exponent, either ``-1`` or ``+1``.

    Returns:
        The plan, which is uninitialised if the current backend cannot execute it.
    """
    if size <= 0:
        raise ValueError(f"Plan size must be positive, got {size}.")
    if direction not in (-1, 1):
        raise ValueError(f"Plan direction must be -1 or +1, got {direction}.")
    if not fft_supported():
        return Plan()
    return Plan(size, direction)
