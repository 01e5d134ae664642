"""Discrete Fourier transform."""

from __future__ import annotations

from typing import TYPE_CHECKING

from matsubara import numpy as np
from matsubara._backend import Plan, fft_supported, make_plan
from matsubara.transform.base import BaseTransform

if TYPE_CHECKING:
    from matsubara.typing import Array


class DFT(BaseTransform):
    r"""Unnormalised discrete Fourier transform.

    The transform is defined as

    .. math::
        y_k \mathrel{+}= \sum_{j=0}^{n-1} e^{\pm 2 \pi i k j / n} x_j,

    where the sign of the exponent is the direction of the transform. An accelerated backend is
    used where available, and a naive summation otherwise.
    """

    _options = ("size", "direction")

    def __init__(self, size: int, direction: int, use_fft: bool | None = None) -> None:
        """Initialise the transform.

        Args:
            size: Size of the transform.
            direction: Sign of the exponent, either ``-1`` or ``+1``.
            use_fft: Whether to use the accelerated backend. Default is to use it if available.
        """
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}.")
        if direction not in (-1, 1):
            raise ValueError(f"direction must be -1 or +1, got {direction}.")
        if use_fft is None:
            use_fft = fft_supported()

        self._size = size
        self._direction = direction
        self._plan = make_plan(size, direction) if use_fft else Plan()

    def __call__(self, inp: Array, out: Array) -> None:
        """Apply the transform, accumulating into the output.

        Args:
            inp: Input array, with size :meth:`in_size`.
            out: Output array, with size :meth:`out_size`.
        """
        if not self.use_fft():
            self.naive(inp, out)
            return

        self.plan.input_buffer()[:] = inp
        self.plan.execute()
        out += self.plan.output_buffer()

    def naive(self, inp: Array, out: Array) -> None:
        """Apply the transform by direct summation, accumulating into the output.

        Args:
            inp: Input array, with size :meth:`in_size`.
            out: Output array, with size :meth:`out_size`.
        """
        # Reduce the index products modulo n to keep the phases accurate for large n
        k = np.arange(self.size)
        kj = np.outer(k, k) % self.size
        kernel = np.exp(self.direction * 2.0j * np.pi / self.size * kj)
        out += kernel @ inp

    def in_size(self) -> int:
        """Get the size of the input."""
        return self._size

    def out_size(self) -> int:
        """Get the size of the output."""
        return self._size

    @property
    def size(self) -> int:
        """Get the size of the transform."""
        return self._size

    @property
    def direction(self) -> int:
        """Get the sign of the exponent."""
        return self._direction

    @property
    def plan(self) -> Plan:
        """Get the plan of the accelerated transform."""
        return self._plan
