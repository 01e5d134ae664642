"""Transforms with an analytic treatment of the high-frequency tail."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from matsubara import numpy as np
from matsubara.transform.base import BaseTransform
from matsubara.transform.common import Statistics
from matsubara.transform.fourier import IwToTau

if TYPE_CHECKING:
    from typing import Any, Sequence

    from matsubara._backend import Plan
    from matsubara.typing import Array


class BaseTailModel(ABC):
    """Base class for analytic models of the high-frequency tail."""

    @abstractmethod
    def value_in_frequency(self, index: int) -> complex:
        """Get the value of the model at a Matsubara frequency.

        Args:
            index: Index of the Matsubara frequency.

        Returns:
            Value of the model.
        """
        pass

    @abstractmethod
    def value_in_time(self, tau: float) -> float:
        r"""Get the value of the model at an imaginary time.

        Args:
            tau: Imaginary time, in the interval :math:`[0, \beta)`.

        Returns:
            Value of the model.
        """
        pass


class MomentTailModel(BaseTailModel):
    r"""High-frequency tail model from the moments of a fermionic function.

    The model is the expansion

    .. math::
        f(i \omega_k) \approx \sum_{m=1}^{M} \frac{c_m}{(i \omega_k)^m},

    for :math:`M \leq 3`, whose imaginary time counterparts for :math:`0 \leq \tau < \beta` are

    .. math::
        -\frac{c_1}{2}, \quad \frac{c_2 (2 \tau - \beta)}{4}, \quad
        \frac{c_3 \tau (\beta - \tau)}{4}.
    """

    max_moments = 3

    def __init__(
        self, moments: Sequence[float], beta: float, statistics: Statistics | str = "fermionic"
    ) -> None:
        r"""Initialise the model.

        Args:
            moments: Moments :math:`c_1, \ldots, c_M` of the expansion.
            beta: Inverse temperature.
            statistics: Statistics of the function.
        """
        statistics = Statistics(statistics)
        if statistics != Statistics.FERMIONIC:
            raise NotImplementedError(f"Tail model for {statistics.value} statistics.")
        if len(moments) > self.max_moments:
            raise ValueError(
                f"At most {self.max_moments} moments are supported, got {len(moments)}."
            )
        if beta <= 0:
            raise ValueError(f"beta must be positive, got {beta}.")

        self._moments = tuple(float(m) for m in moments)
        self._beta = float(beta)
        self._statistics = statistics

    def value_in_frequency(self, index: int) -> complex:
        """Get the value of the model at a Matsubara frequency.

        Args:
            index: Index of the Matsubara frequency.

        Returns:
            Value of the model.
        """
        iw = 1.0j * np.pi * (2 * index + self.statistics.offset) / self.beta
        return complex(sum(c / iw ** (m + 1) for m, c in enumerate(self.moments)))

    def value_in_time(self, tau: float) -> float:
        r"""Get the value of the model at an imaginary time.

        Args:
            tau: Imaginary time, in the interval :math:`[0, \beta)`.

        Returns:
            Value of the model.
        """
        beta = self.beta
        terms = (-0.5, 0.25 * (2.0 * tau - beta), 0.25 * tau * (beta - tau))
        return float(sum(c * t for c, t in zip(self.moments, terms)))

    def __repr__(self) -> str:
        """Get a string representation of the model."""
        return f"{self.__class__.__name__}(moments={self.moments}, beta={self.beta})"

    @property
    def moments(self) -> tuple[float, ...]:
        """Get the moments of the expansion."""
        return self._moments

    @property
    def beta(self) -> float:
        """Get the inverse temperature."""
        return self._beta

    @property
    def statistics(self) -> Statistics:
        """Get the statistics of the function."""
        return self._statistics


class IwToTauModel(BaseTransform):
    """Transform from Matsubara frequencies to imaginary time, subtracting a tail model.

    The model is subtracted from the input before the transform, and its imaginary time
    counterpart is added to the output afterwards, such that only the residual is transformed.
    """

    _options = ("niw", "ntau", "beta", "statistics", "model")

    in_dtype = IwToTau.in_dtype
    out_dtype = IwToTau.out_dtype

    def __init__(
        self,
        niw: int,
        ntau: int,
        beta: float,
        statistics: Statistics | str,
        model: BaseTailModel,
        use_fft: bool | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialise the transform.

        Args:
            niw: Number of Matsubara frequencies.
            ntau: Number of imaginary time points.
            beta: Inverse temperature.
            statistics: Statistics of the function.
            model: Model of the high-frequency tail.
            use_fft: Whether to use the accelerated backend. Default is to use it if available.
            kwargs: Additional keyword arguments for :class:`IwToTau`.
        """
        self._transform = IwToTau(niw, ntau, beta, statistics, use_fft=use_fft, **kwargs)
        self._model = model
        self._buffer = np.zeros(self.in_size(), dtype=np.complex128)

        # The model is fixed, so its values on both grids are evaluated once
        self._model_iw = np.array(
            [model.value_in_frequency(k) for k in range(self.in_size())], dtype=np.complex128
        )
        self._model_tau = np.array(
            [model.value_in_time(self.transform.tau_value(n)) for n in range(self.out_size())],
            dtype=np.float64,
        )

    @classmethod
    def from_moments(
        cls,
        niw: int,
        ntau: int,
        beta: float,
        statistics: Statistics | str,
        moments: Sequence[float],
        use_fft: bool | None = None,
        **kwargs: Any,
    ) -> IwToTauModel:
        """Create a transform with a tail model given by its moments.

        Args:
            niw: Number of Matsubara frequencies.
            ntau: Number of imaginary time points.
            beta: Inverse temperature.
            statistics: Statistics of the function.
            moments: Moments of the high-frequency tail, see :class:`MomentTailModel`.
            use_fft: Whether to use the accelerated backend. Default is to use it if available.
            kwargs: Additional keyword arguments for :class:`IwToTau`.

        Returns:
            Transform instance.
        """
        model = MomentTailModel(moments, beta, statistics)
        return cls(niw, ntau, beta, statistics, model, use_fft=use_fft, **kwargs)

    def __call__(self, inp: Array, out: Array) -> None:
        """Apply the transform, accumulating into the output.

        Args:
            inp: Values at the Matsubara frequencies, with size :meth:`in_size`.
            out: Values at the imaginary time points, with size :meth:`out_size`.
        """
        # Remove the model in frequency space
        self._buffer[:] = inp
        self._buffer -= self._model_iw

        self.transform(self._buffer, out)

        # Add the model in imaginary time
        out += self._model_tau

    def naive(self, inp: Array, out: Array) -> None:
        """Apply the transform by direct summation, accumulating into the output.

        Args:
            inp: Values at the Matsubara frequencies, with size :meth:`in_size`.
            out: Values at the imaginary time points, with size :meth:`out_size`.
        """
        self.transform.naive(np.asarray(inp) - self._model_iw, out)
        out += self._model_tau

    def in_size(self) -> int:
        """Get the size of the input."""
        return self.transform.in_size()

    def out_size(self) -> int:
        """Get the size of the output."""
        return self.transform.out_size()

    @property
    def transform(self) -> IwToTau:
        """Get the underlying transform."""
        return self._transform

    @property
    def model(self) -> BaseTailModel:
        """Get the model of the high-frequency tail."""
        return self._model

    @property
    def plan(self) -> Plan:
        """Get the plan of the accelerated transform."""
        return self.transform.plan

    @property
    def niw(self) -> int:
        """Get the number of Matsubara frequencies."""
        return self.transform.niw

    @property
    def ntau(self) -> int:
        """Get the number of imaginary time points."""
        return self.transform.ntau

    @property
    def beta(self) -> float:
        """Get the inverse temperature."""
        return self.transform.beta

    @property
    def statistics(self) -> Statistics:
        """Get the statistics of the function."""
        return self.transform.statistics
