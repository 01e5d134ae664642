"""Tests for :module:`~matsubara.transform.model`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pytest

from matsubara import IwToTau, IwToTauModel, MomentTailModel, apply
from matsubara.transform import BaseTailModel, matsubara_points, tau_points

if TYPE_CHECKING:
    from .conftest import Helper


class ZeroModel(BaseTailModel):
    """Tail model which vanishes in both domains."""

    def value_in_frequency(self, index: int) -> complex:
        """Get the value of the model at a Matsubara frequency."""
        return 0.0j

    def value_in_time(self, tau: float) -> float:
        """Get the value of the model at an imaginary time."""
        return 0.0


def single_pole(energy: float, niw: int, ntau: int, beta: float) -> tuple[np.ndarray, np.ndarray]:
    """Get a fermionic single pole Green's function in frequency and imaginary time."""
    iw = 1.0j * matsubara_points(niw, beta, "fermionic")
    tau = tau_points(ntau, beta)
    giw = 1.0 / (iw - energy)
    gtau = -np.exp(-energy * tau) / (1.0 + np.exp(-beta * energy))
    return giw, gtau


@pytest.mark.parametrize("statistics", ["bosonic", "fermionic"])
@pytest.mark.parametrize("niw, ntau", [(4, 8), (12, 5)])
def test_zero_model(helper: Helper, use_fft: bool, statistics: str, niw: int, ntau: int) -> None:
    """Test that subtracting a vanishing model does not change the transform."""
    transform = IwToTau(niw, ntau, 2.0, statistics, use_fft=use_fft)
    transform_model = IwToTauModel(niw, ntau, 2.0, statistics, ZeroModel(), use_fft=use_fft)
    assert transform_model.use_fft() == transform.use_fft()
    assert transform_model.in_size() == niw
    assert transform_model.out_size() == ntau

    inp = helper.random_frequency_function(niw)
    assert helper.are_equal_arrays(apply(transform_model, inp), apply(transform, inp))


@pytest.mark.parametrize("energy", [-0.5, 0.3, 1.2])
def test_single_pole(helper: Helper, use_fft: bool, energy: float) -> None:
    """Test that subtracting the tail recovers a single pole Green's function accurately."""
    niw, ntau, beta = 256, 64, 10.0
    giw, gtau = single_pole(energy, niw, ntau, beta)
    moments = [1.0, energy, energy**2]

    transform_model = IwToTauModel.from_moments(
        niw, ntau, beta, "fermionic", moments, use_fft=use_fft
    )
    assert isinstance(transform_model.model, MomentTailModel)
    assert helper.are_equal_arrays(apply(transform_model, giw), gtau, tol=1e-6)

    # Without the tail, the discontinuity at tau = 0 is not resolved
    transform = IwToTau(niw, ntau, beta, "fermionic", use_fft=use_fft)
    assert np.max(np.abs(apply(transform, giw) - gtau)) > 1e-1


def test_model_naive(helper: Helper) -> None:
    """Test that the accelerated and naive transforms agree with a tail model."""
    niw, ntau, beta = 40, 16, 5.0
    giw, _ = single_pole(0.7, niw, ntau, beta)
    transform_model = IwToTauModel.from_moments(
        niw, ntau, beta, "fermionic", [1.0, 0.7], use_fft=True
    )
    out = apply(transform_model, giw)
    out_naive = np.zeros(ntau)
    transform_model.naive(giw, out_naive)
    assert helper.are_equal_arrays(out, out_naive)


def test_model_accumulate(helper: Helper, use_fft: bool) -> None:
    """Test that the model is added once per call when accumulating."""
    niw, ntau, beta = 16, 16, 4.0
    giw, _ = single_pole(0.2, niw, ntau, beta)
    transform_model = IwToTauModel.from_moments(
        niw, ntau, beta, "fermionic", [1.0], use_fft=use_fft
    )
    once = apply(transform_model, giw)

    out = np.zeros(ntau)
    transform_model(giw, out)
    transform_model(giw, out)
    assert helper.are_equal_arrays(out, 2 * once)

    # The input is not modified by the subtraction
    assert helper.are_equal_arrays(giw, single_pole(0.2, niw, ntau, beta)[0])


def test_moment_tail_model() -> None:
    """Test the values of the moment tail model."""
    beta = 4.0
    model = MomentTailModel([2.0, 3.0, 5.0], beta)
    iw = 1.0j * np.pi / beta
    assert np.isclose(model.value_in_frequency(0), 2.0 / iw + 3.0 / iw**2 + 5.0 / iw**3)
    assert np.isclose(model.value_in_time(0.0), -1.0 - 3.0)
    assert np.isclose(model.value_in_time(1.0), -1.0 + 3.0 * (2.0 - 4.0) / 4 + 5.0 * 3.0 / 4)

    model = MomentTailModel([], beta)
    assert model.value_in_frequency(3) == 0.0
    assert model.value_in_time(1.0) == 0.0


def test_moment_tail_model_invalid() -> None:
    """Test invalid parameters of the moment tail model."""
    with pytest.raises(NotImplementedError):
        MomentTailModel([1.0], 1.0, "bosonic")
    with pytest.raises(NotImplementedError):
        IwToTauModel.from_moments(4, 8, 1.0, "bosonic", [1.0])
    with pytest.raises(ValueError):
        MomentTailModel([1.0, 0.0, 0.0, 0.0], 1.0)
    with pytest.raises(ValueError):
        MomentTailModel([1.0], -1.0)
