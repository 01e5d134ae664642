"""Fourier transforms between Matsubara frequencies and imaginary time."""

from __future__ import annotations

from typing import TYPE_CHECKING

from matsubara import numpy as np
from matsubara._backend import Plan, fft_supported, make_plan
from matsubara.transform.base import BaseTransform
from matsubara.transform.common import ConsistencyError, Statistics, oversampling_factor

if TYPE_CHECKING:
    from matsubara.typing import Array


class BaseFourier(BaseTransform):
    """Base class for transforms between Matsubara frequencies and imaginary time."""

    _options = ("niw", "ntau", "beta", "statistics", "oversampling")

    _direction: int

    def __init__(
        self,
        niw: int,
        ntau: int,
        beta: float,
        statistics: Statistics | str,
        use_fft: bool | None = None,
    ) -> None:
        """Initialise the transform.

        Args:
            niw: Number of Matsubara frequencies.
            ntau: Number of imaginary time points.
            beta: Inverse temperature.
            statistics: Statistics of the function.
            use_fft: Whether to use the accelerated backend. Default is to use it if available.
        """
        if beta <= 0:
            raise ValueError(f"beta must be positive, got {beta}.")
        if use_fft is None:
            use_fft = fft_supported()

        self._niw = niw
        self._ntau = ntau
        self._beta = float(beta)
        self._statistics = Statistics(statistics)

        # Make sure the padded time axis is never shorter than the frequency axis, since the
        # frequencies can always be padded with zeros
        self._oversampling = oversampling_factor(niw, ntau)

        size = self.ntau * self.oversampling
        self._plan = make_plan(size, self._direction) if use_fft else Plan()

    def _phases(self, sign: int) -> Array:
        """Get the phase factors applied to the imaginary time points for the statistics."""
        if self.statistics == Statistics.BOSONIC:
            return np.ones(self.ntau)
        return np.exp(sign * 1.0j * np.pi * np.arange(self.ntau) / self.ntau)

    def _angles(self) -> Array:
        r"""Get the angles :math:`\omega_k \tau_n` with shape ``(ntau, niw)``."""
        k = 2 * np.arange(self.niw) + self.statistics.offset
        n = np.arange(self.ntau)
        # Reduce modulo the period of 2 ntau to keep the phases accurate
        return np.pi * (np.outer(n, k) % (2 * self.ntau)) / self.ntau

    def tau_value(self, n: int | Array) -> float | Array:
        """Get the imaginary time of a point on the time grid."""
        return self.beta * n / self.ntau

    @property
    def niw(self) -> int:
        """Get the number of Matsubara frequencies."""
        return self._niw

    @property
    def ntau(self) -> int:
        """Get the number of imaginary time points."""
        return self._ntau

    @property
    def beta(self) -> float:
        """Get the inverse temperature."""
        return self._beta

    @property
    def statistics(self) -> Statistics:
        """Get the statistics of the function."""
        return self._statistics

    @property
    def oversampling(self) -> int:
        """Get the oversampling factor of the imaginary time axis."""
        return self._oversampling

    @property
    def plan(self) -> Plan:
        """Get the plan of the accelerated transform."""
        return self._plan


class IwToTau(BaseFourier):
    r"""Transform from Matsubara frequencies to imaginary time.

    For a function with :math:`f(-i \omega_k) = f(i \omega_k)^*`, the transform is

    .. math::
        f(\tau_n) \mathrel{+}= \frac{2}{\beta} \sum_{k=0}^{n_\omega - 1}
            \mathrm{Re} \left[ e^{-i \omega_k \tau_n} f(i \omega_k) \right],

    with :math:`\omega_k = \pi (2 k + \zeta) / \beta`, :math:`\tau_n = \beta n / n_\tau`, and
    :math:`\zeta` is zero for bosons and one for fermions.

    The imaginary part of the accelerated result is discarded without checking, unless
    ``check_imag`` is set, since the one-sided sum is in general not real.
    """

    _direction = -1
    _options = BaseFourier._options + ("check_imag",)

    in_dtype = np.complex128
    out_dtype = np.float64

    def __init__(
        self,
        niw: int,
        ntau: int,
        beta: float,
        statistics: Statistics | str,
        use_fft: bool | None = None,
        check_imag: bool = False,
        rtol: float = 1e-10,
        atol: float = 1e-12,
    ) -> None:
        """Initialise the transform.

        Args:
            niw: Number of Matsubara frequencies.
            ntau: Number of imaginary time points.
            beta: Inverse temperature.
            statistics: Statistics of the function.
            use_fft: Whether to use the accelerated backend. Default is to use it if available.
            check_imag: Whether to check that the imaginary part of the accelerated result
                vanishes before it is discarded. Only meaningful for inputs whose one-sided sum is
                real.
            rtol: Relative tolerance of the imaginary part check.
            atol: Absolute tolerance of the imaginary part check.
        """
        super().__init__(niw, ntau, beta, statistics, use_fft=use_fft)
        self.check_imag = check_imag
        self.rtol = rtol
        self.atol = atol

    def __call__(self, inp: Array, out: Array) -> None:
        """Apply the transform, accumulating into the output.

        Args:
            inp: Values at the Matsubara frequencies, with size :meth:`in_size`.
            out: Values at the imaginary time points, with size :meth:`out_size`.

        Raises:
            ConsistencyError: If ``check_imag`` is set and the result has a non-negligible
                imaginary part.
        """
        if not self.use_fft():
            self.naive(inp, out)
            return

        # Zero padding in frequency is interpolation in time
        buffer = self.plan.input_buffer()
        buffer[:] = 0.0
        buffer[: self.niw] = inp
        self.plan.execute()

        # Subsample the oversampled time axis
        ftau = self.plan.output_buffer()[:: self.oversampling] * (2.0 / self.beta)
        ftau *= self._phases(-1)

        if self.check_imag:
            residual = np.abs(ftau.imag) - self.rtol * np.abs(ftau.real) - self.atol
            if np.any(residual > 0):
                raise ConsistencyError(
                    f"Imaginary part of the transformed function does not vanish: "
                    f"{np.max(np.abs(ftau.imag)):.3e}"
                )

        out += ftau.real

    def naive(self, inp: Array, out: Array) -> None:
        """Apply the transform by direct summation, accumulating into the output.

        Args:
            inp: Values at the Matsubara frequencies, with size :meth:`in_size`.
            out: Values at the imaginary time points, with size :meth:`out_size`.
        """
        inp = np.asarray(inp)
        wt = self._angles()
        out += (2.0 / self.beta) * (np.cos(wt) @ inp.real + np.sin(wt) @ inp.imag)

    def in_size(self) -> int:
        """Get the size of the input."""
        return self.niw

    def out_size(self) -> int:
        """Get the size of the output."""
        return self.ntau


class TauToIw(BaseFourier):
    r"""Transform from imaginary time to Matsubara frequencies.

    The transform is the rectangular quadrature of the Fourier integral,

    .. math::
        f(i \omega_k) \mathrel{+}= \frac{\beta}{n_\tau} \sum_{n=0}^{n_\tau - 1}
            e^{i \omega_k \tau_n} f(\tau_n),

    with the grids as in :class:`IwToTau`.
    """

    _direction = 1

    in_dtype = np.float64
    out_dtype = np.complex128

    def __call__(self, inp: Array, out: Array) -> None:
        """Apply the transform, accumulating into the output.

        Args:
            inp: Values at the imaginary time points, with size :meth:`in_size`.
            out: Values at the Matsubara frequencies, with size :meth:`out_size`.
        """
        if not self.use_fft():
            self.naive(inp, out)
            return

        # Only every oversampling-th slot is populated, the frequency axis is not oversampled
        buffer = self.plan.input_buffer()
        buffer[:] = 0.0
        buffer[:: self.oversampling] = np.asarray(inp) * self._phases(1) * (self.beta / self.ntau)
        self.plan.execute()

        out += self.plan.output_buffer()[: self.niw]

    def naive(self, inp: Array, out: Array) -> None:
        """Apply the transform by direct summation, accumulating into the output.

        Args:
            inp: Values at the imaginary time points, with size :meth:`in_size`.
            out: Values at the Matsubara frequencies, with size :meth:`out_size`.
        """
        wt = self._angles().T
        out += (self.beta / self.ntau) * (np.exp(1.0j * wt) @ np.asarray(inp))

    def in_size(self) -> int:
        """Get the size of the input."""
        return self.ntau

    def out_size(self) -> int:
        """Get the size of the output."""
        return self.niw
