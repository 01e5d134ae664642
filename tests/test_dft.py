"""Tests for :module:`~matsubara.transform.dft`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pytest

from matsubara import DFT, apply
from matsubara.transform import SizeMismatchError

if TYPE_CHECKING:
    from .conftest import Helper


@pytest.mark.parametrize("size", [1, 2, 7, 16, 33, 128])
@pytest.mark.parametrize("direction", [-1, 1])
def test_dft_naive(helper: Helper, backend: str, size: int, direction: int) -> None:
    """Test that the accelerated and naive transforms agree."""
    dft = DFT(size, direction)
    assert dft.use_fft() == (backend != "none")
    assert dft.in_size() == dft.out_size() == size

    inp = helper.random_frequency_function(size, seed=size)
    out = np.zeros(size, dtype=np.complex128)
    dft(inp, out)
    out_naive = np.zeros(size, dtype=np.complex128)
    dft.naive(inp, out_naive)

    tol = 10 * size * np.finfo(np.float64).eps * max(np.max(np.abs(out_naive)), 1.0)
    assert helper.are_equal_arrays(out, out_naive, tol=tol)


@pytest.mark.parametrize("direction", [-1, 1])
def test_dft_definition(helper: Helper, use_fft: bool, direction: int) -> None:
    """Test the transform against numpy, including the sign convention."""
    size = 12
    dft = DFT(size, direction, use_fft=use_fft)
    inp = helper.random_frequency_function(size)
    out = apply(dft, inp)
    expected = np.fft.fft(inp) if direction == -1 else np.fft.ifft(inp) * size
    assert helper.are_equal_arrays(out, expected)


def test_dft_accumulate(helper: Helper, use_fft: bool) -> None:
    """Test that the transform accumulates into the output."""
    dft = DFT(9, 1, use_fft=use_fft)
    inp = helper.random_frequency_function(9)
    once = apply(dft, inp)

    out = np.zeros(9, dtype=np.complex128)
    dft(inp, out)
    dft(inp, out)
    assert helper.are_equal_arrays(out, 2 * once)

    out = np.ones(9, dtype=np.complex128)
    dft(inp, out)
    assert helper.are_equal_arrays(out, once + 1)


def test_dft_delta(helper: Helper, use_fft: bool) -> None:
    """Test the transform of a delta function."""
    dft = DFT(8, -1, use_fft=use_fft)
    inp = np.zeros(8, dtype=np.complex128)
    inp[0] = 1.0
    assert helper.are_equal_arrays(apply(dft, inp), np.ones(8))


def test_dft_invalid() -> None:
    """Test invalid parameters and inputs."""
    with pytest.raises(ValueError):
        DFT(0, 1)
    with pytest.raises(ValueError):
        DFT(4, 0)
    with pytest.raises(SizeMismatchError):
        apply(DFT(4, 1), np.zeros(5))
