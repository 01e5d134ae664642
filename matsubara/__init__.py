r"""
***************************************************************************
matsubara: Conversion between Matsubara frequencies and imaginary time
***************************************************************************

Transforms in :mod:`matsubara` convert functions sampled on a set of Matsubara frequencies to their
values on a uniform imaginary time grid, and back again. Both bosonic and fermionic statistics are
supported. Each transform is constructed once with fixed sizes, inverse temperature and statistics,
and can then be applied to any number of input buffers, accumulating into the output buffer.

The transforms are:

.. list-table::
   :header-rows: 1
   :widths: 20 80

   * - Transform
     - Description
   * - :class:`~matsubara.transform.dft.DFT`
     - Unnormalised discrete Fourier transform of a fixed size and direction.
   * - :class:`~matsubara.transform.fourier.IwToTau`
     - Matsubara frequencies to imaginary time.
   * - :class:`~matsubara.transform.fourier.TauToIw`
     - Imaginary time to Matsubara frequencies.
   * - :class:`~matsubara.transform.model.IwToTauModel`
     - Matsubara frequencies to imaginary time, treating a high-frequency tail analytically.

Each transform executes an accelerated fast Fourier transform when a backend is available, and a
naive :math:`\mathcal{O}(N^2)` summation otherwise. The backend is chosen by the
``MATSUBARA_FFT_BACKEND`` environment variable or :func:`~matsubara._backend.set_backend`.


Submodules
----------

.. autosummary::
    :toctree: _autosummary

    matsubara.transform

"""

__version__ = "1.0.0"

import numpy
import scipy

from matsubara._backend import set_backend, get_backend, fft_supported, make_plan, Plan
from matsubara.printing import console, quiet
from matsubara.transform import (
    Statistics,
    DFT,
    IwToTau,
    TauToIw,
    IwToTauModel,
    MomentTailModel,
    apply,
)
