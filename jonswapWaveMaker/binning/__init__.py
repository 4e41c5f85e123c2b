# -- Binning Subpackage -- #

'''
Frequency bin generation and per-bin spectral integration.
'''

from jonswapWaveMaker.binning.boundaries import (
    BinSet,
    BinBoundaryGenerator,
    RandomBoundaryStrategy,
    UniformBoundaryStrategy,
    centerFrequencies,
)
from jonswapWaveMaker.binning.integrator import BinEnergies, BinIntegrator, trapezoid
