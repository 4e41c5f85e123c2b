# -- Spectrum Subpackage -- #

'''
JONSWAP spectral parameters and density evaluation.
'''

from jonswapWaveMaker.spectrum.parameters import SpectrumParameters
from jonswapWaveMaker.spectrum.jonswap import JonswapSpectrum
from jonswapWaveMaker.spectrum.protocols import SpectrumModel
