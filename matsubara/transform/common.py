"""Common definitions for the transforms."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from matsubara import numpy as np

if TYPE_CHECKING:
    from matsubara.transform.base import BaseTransform
    from matsubara.typing import Array


class SizeMismatchError(ValueError):
    """Raised when a buffer does not have the size fixed at construction of a transform."""


class ConsistencyError(RuntimeError):
    """Raised when the result of a transform violates an internal consistency check."""


class Statistics(Enum):
    r"""Enumeration for the statistics of the transformed function.

    The valid statistics are:
    - `bosonic`: Periodic in imaginary time, with frequencies :math:`2 k \pi / \beta`.
    - `fermionic`: Antiperiodic in imaginary time, with frequencies
      :math:`(2 k + 1) \pi / \beta`.
    """

    BOSONIC = "bosonic"
    FERMIONIC = "fermionic"

    @property
    def offset(self) -> int:
        """Get the offset of the Matsubara frequency index for these statistics."""
        return {Statistics.BOSONIC: 0, Statistics.FERMIONIC: 1}[self]


def oversampling_factor(niw: int, ntau: int) -> int:
    """Get the oversampling factor of the imaginary time axis.

    The factor is the ceiling of ``niw / ntau``, such that the padded transform of length
    ``ntau * factor`` is never shorter than the number of frequencies.

    Args:
        niw: Number of Matsubara frequencies.
        ntau: Number of imaginary time points.

    Returns:
        The oversampling factor, which is at least one.
    """
    if niw <= 0 or ntau <= 0:
        raise ValueError(f"Sizes must be positive, got niw={niw} and ntau={ntau}.")
    return -(-niw // ntau)


def matsubara_points(niw: int, beta: float, statistics: Statistics | str) -> Array:
    r"""Get the Matsubara frequencies.

    Args:
        niw: Number of Matsubara frequencies.
        beta: Inverse temperature.
        statistics: Statistics of the function.

    Returns:
        The frequencies :math:`\pi (2 k + \zeta) / \beta` for :math:`k = 0, \ldots, n - 1`.
    """
    statistics = Statistics(statistics)
    return np.pi * (2 * np.arange(niw) + statistics.offset) / beta


def tau_points(ntau: int, beta: float) -> Array:
    r"""Get the imaginary time points.

    Args:
        ntau: Number of imaginary time points.
        beta: Inverse temperature.

    Returns:
        The uniform points :math:`\beta n / N` for :math:`n = 0, \ldots, N - 1`.
    """
    return beta * np.arange(ntau) / ntau


def apply(transform: BaseTransform, inp: Array) -> Array:
    """Apply a transform to an input array, returning a new output array.

    Args:
        transform: The transform to apply.
        inp: The input array, with size ``transform.in_size()``.

    Returns:
        The transformed array, with size ``transform.out_size()``.

    Raises:
        SizeMismatchError: If the size of the input does not match the transform.
        ValueError: If a complex input is given to a transform with real input.
    """
    if np.iscomplexobj(inp) and not np.issubdtype(transform.in_dtype, np.complexfloating):
        raise ValueError(
            f"{transform.__class__.__name__} expects a real input, got a complex input"
        )
    inp = np.asarray(inp, dtype=transform.in_dtype)
    if inp.shape != (transform.in_size(),):
        raise SizeMismatchError(
            f"size mismatch: {transform.__class__.__name__} expects an input of size "
            f"{transform.in_size()}, got shape {inp.shape}"
        )
    out = np.zeros(transform.out_size(), dtype=transform.out_dtype)
    transform(inp, out)
    return out
