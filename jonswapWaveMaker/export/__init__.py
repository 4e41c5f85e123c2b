# -- Export Subpackage -- #

'''
Spectrum table output.
'''

from jonswapWaveMaker.export.spectrumTable import (
    TABLE_HEADER,
    readSpectrumTable,
    sampleFrequencies,
    writeSpectrumTable,
)
