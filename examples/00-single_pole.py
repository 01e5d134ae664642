"""
Example of transforming a single pole Green's function from Matsubara
frequencies to imaginary time, with and without an analytic treatment of
the high-frequency tail.
"""

import numpy as np
from matsubara import IwToTau, IwToTauModel, apply, console
from matsubara.transform import matsubara_points, tau_points

niw = 512
ntau = 128
beta = 20.0
energy = 0.4

# Define the Green's function on both axes
iw = 1.0j * matsubara_points(niw, beta, "fermionic")
tau = tau_points(ntau, beta)
giw = 1.0 / (iw - energy)
gtau_ref = -np.exp(-energy * tau) / (1.0 + np.exp(-beta * energy))

# Transform without the tail model
transform = IwToTau(niw, ntau, beta, "fermionic")
gtau = apply(transform, giw)

# Transform with the first three moments of the tail
transform_model = IwToTauModel.from_moments(
    niw, ntau, beta, "fermionic", [1.0, energy, energy**2]
)
gtau_model = apply(transform_model, giw)

console.print(f"Error without tail model: {np.max(np.abs(gtau - gtau_ref)):.3e}")
console.print(f"Error with tail model:    {np.max(np.abs(gtau_model - gtau_ref)):.3e}")
