r"""Transforms between Matsubara frequencies and imaginary time.

The Matsubara frequencies are :math:`\omega_k = \pi (2 k + \zeta) / \beta`, with :math:`\zeta` zero
for bosonic and one for fermionic statistics, and the imaginary time points are the uniform grid
:math:`\tau_n = \beta n / n_\tau` on :math:`[0, \beta)`.

Every transform accumulates into its output buffer, so that

.. code-block:: python

    out = numpy.zeros(transform.out_size())
    transform(inp, out)

gives the transformed function, while :func:`~matsubara.transform.common.apply` allocates the
output and checks the size of the input.


Submodules
----------

.. autosummary::
    :toctree:

    common
    dft
    fourier
    model
"""

from __future__ import annotations

from matsubara.transform.common import (
    Statistics,
    SizeMismatchError,
    ConsistencyError,
    oversampling_factor,
    matsubara_points,
    tau_points,
    apply,
)
from matsubara.transform.base import BaseTransform
from matsubara.transform.dft import DFT
from matsubara.transform.fourier import IwToTau, TauToIw
from matsubara.transform.model import BaseTailModel, MomentTailModel, IwToTauModel
