"""Configuration for :mod:`pytest`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pytest

from matsubara import get_backend, set_backend

if TYPE_CHECKING:
    from typing import Iterator

    from matsubara.typing import Array


class Helper:
    """Helper class for tests."""

    @staticmethod
    def are_equal_arrays(array1: Array, array2: Array, tol: float = 1e-10) -> bool:
        """Check if two arrays are equal to within a threshold."""
        print(
            f"Error in {object.__repr__(array1)} and {object.__repr__(array2)}: "
            f"{np.max(np.abs(array1 - array2))}"
        )
        return np.allclose(array1, array2, rtol=0.0, atol=tol)

    @staticmethod
    def random_frequency_function(niw: int, seed: int = 0) -> Array:
        """Get a random complex function on the Matsubara frequencies."""
        rng = np.random.default_rng(seed)
        return rng.standard_normal(niw) + 1.0j * rng.standard_normal(niw)

    @staticmethod
    def random_time_function(ntau: int, seed: int = 0) -> Array:
        """Get a random real function on the imaginary time points."""
        rng = np.random.default_rng(seed)
        return rng.standard_normal(ntau)


@pytest.fixture(scope="session")
def helper() -> Helper:
    """Fixture for the :class:`Helper` class."""
    return Helper()


@pytest.fixture(params=["scipy", "numpy", "none"])
def backend(request: pytest.FixtureRequest) -> Iterator[str]:
    """Fixture to run a test with each backend, restoring the previous one afterwards."""
    previous = get_backend()
    set_backend(request.param)
    yield request.param
    set_backend(previous)


@pytest.fixture(params=[True, False], ids=["fft", "naive"])
def use_fft(request: pytest.FixtureRequest) -> bool:
    """Fixture to run a test with both the accelerated and naive transforms."""
    return request.param
