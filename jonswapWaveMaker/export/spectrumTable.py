# -- Spectrum Table Exporter -- #

'''
Writes a sampled spectrum as a two-column text table.

Format:
    w\tamp
    <omega>\t<density>
    ...

One line per sample, tab separated. omega must be > 0 for every
sample; the table never contains inf/nan from the omega = 0 singularity.
'''

from __future__ import annotations

import logging
import math
import os

import numpy as np

from jonswapWaveMaker.errors import InvalidParameterError
from jonswapWaveMaker.spectrum.protocols import SpectrumModel

logger = logging.getLogger(__name__)

TABLE_HEADER = 'w\tamp'


def sampleFrequencies(start: float, stop: float, step: float) -> np.ndarray:
    '''
    Sample points start, start + step, ... strictly below stop.

    Parameters:
    -----------
    start : float
        First angular frequency [rad/s], must be > 0
    stop : float
        Exclusive upper bound [rad/s]
    step : float
        Sample spacing [rad/s]

    Returns:
    --------
    np.ndarray : Angular frequencies [rad/s]
    '''
    if not math.isfinite(step) or step <= 0.0:
        raise InvalidParameterError(f'Sample step must be a finite positive number, got {step}')
    if not math.isfinite(start) or start <= 0.0:
        raise InvalidParameterError(f'Sample start must be > 0 (density is singular at 0), got {start}')
    if not math.isfinite(stop) or stop <= start:
        raise InvalidParameterError(f'Sample stop must be greater than start, got [{start}, {stop})')

    nSamples = int(math.ceil((stop - start) / step))
    return start + step * np.arange(nSamples)


def writeSpectrumTable(
    filepath: str,
    spectrum: SpectrumModel,
    start: float,
    stop: float,
    step: float,
) -> str:
    '''
    Sample the spectrum and write the (omega, density) table.

    Parameters:
    -----------
    filepath : str
        Output file path
    spectrum : SpectrumModel
        Spectrum to sample
    start, stop, step : float
        Sampling range [start, stop) and spacing [rad/s]

    Returns:
    --------
    str : Path to the written file
    '''
    omegas = sampleFrequencies(start, stop, step)
    densities = spectrum.densityBatch(omegas)

    outputDir = os.path.dirname(filepath)
    if outputDir:
        os.makedirs(outputDir, exist_ok=True)

    np.savetxt(
        filepath,
        np.column_stack((omegas, densities)),
        delimiter='\t',
        header=TABLE_HEADER,
        comments='',
        fmt='%.10g',
    )
    logger.info('Wrote %d spectrum samples to %s', len(omegas), filepath)

    return filepath


def readSpectrumTable(filepath: str) -> tuple[np.ndarray, np.ndarray]:
    '''
    Load a table written by writeSpectrumTable.

    Returns:
    --------
    tuple[np.ndarray, np.ndarray] : (omega, density) columns
    '''
    with open(filepath, 'r') as f:
        header = f.readline().strip()
    if header.split() != TABLE_HEADER.split():
        raise InvalidParameterError(f'Unexpected spectrum table header {header!r} in {filepath}')

    data = np.loadtxt(filepath, delimiter='\t', skiprows=1, ndmin=2)
    return data[:, 0], data[:, 1]
