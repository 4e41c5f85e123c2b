# -- Spectrum Model Protocol -- #

'''
Interface any spectral density model must satisfy.

The bin integrator, table exporter and plots only rely on this protocol,
so another one-dimensional spectrum can be dropped in without changing them.
'''

from __future__ import annotations

from typing import Protocol, Sequence

import numpy as np


class SpectrumModel(Protocol):
    '''Protocol for one-dimensional angular-frequency spectra.'''

    def density(self, omega: float) -> float:
        '''Spectral density S(omega) in m^2*s/rad.'''
        ...

    def densityBatch(self, omegas: Sequence[float] | np.ndarray) -> np.ndarray:
        '''Element-wise S(omega) for a sequence of angular frequencies.'''
        ...
