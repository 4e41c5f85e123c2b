'''
Tests for the JONSWAP spectral density.
'''

import math

import numpy as np
import pytest

from jonswapWaveMaker.errors import SingularEvaluationError
from jonswapWaveMaker.spectrum.jonswap import JonswapSpectrum
from jonswapWaveMaker.spectrum.parameters import SpectrumParameters


def closedForm(omega, alpha=0.0081, wp=0.8, gamma=3.3, s1=0.07, s2=0.09, g=9.81):
    sigma = s1 if omega <= wp else s2
    r = math.exp(-((omega - wp) ** 2) / (2.0 * sigma ** 2 * wp ** 2))
    return alpha * g ** 2 * omega ** -5 * math.exp(-1.2 * (wp / omega) ** 4) * gamma ** r


def testDensityAtPeakMatchesClosedForm(spectrum):
    expected = 0.0081 * 9.81 ** 2 * 0.8 ** -5 * math.exp(-1.2) * 3.3
    assert spectrum.density(0.8) == pytest.approx(expected, rel=1e-12)
    assert spectrum.peakDensity == pytest.approx(expected, rel=1e-12)


@pytest.mark.parametrize('omega', [0.4, 0.7, 0.8, 0.9, 1.5, 3.0])
def testDensityMatchesClosedForm(spectrum, omega):
    assert spectrum.density(omega) == pytest.approx(closedForm(omega), rel=1e-10)


def testDensityIsPositive(spectrum):
    omegas = np.linspace(0.2, 3.0, 400)
    assert np.all(spectrum.densityBatch(omegas) > 0.0)


def testContinuousAtPeak(spectrum):
    below = spectrum.density(0.8 * (1.0 - 1e-9))
    above = spectrum.density(0.8 * (1.0 + 1e-9))
    assert below == pytest.approx(above, rel=1e-6)


def testSigmaBranches():
    narrowLow = JonswapSpectrum(SpectrumParameters(0.0081, 0.8, 3.0, sigmaLow=0.05, sigmaHigh=0.09))
    wideLow = JonswapSpectrum(SpectrumParameters(0.0081, 0.8, 3.0, sigmaLow=0.10, sigmaHigh=0.09))

    # Only the low-side width changes the density below the peak
    assert narrowLow.density(0.7) < wideLow.density(0.7)
    assert narrowLow.density(0.9) == pytest.approx(wideLow.density(0.9), rel=1e-14)


def testUnitSharpeningIsPiersonMoskowitz():
    pmSpectrum = JonswapSpectrum(SpectrumParameters(0.0081, 0.8, 3.0, peakSharpening=1.0))
    omega = 1.1
    expected = 0.0081 * 9.81 ** 2 * omega ** -5 * math.exp(-1.2 * (0.8 / omega) ** 4)
    assert pmSpectrum.density(omega) == pytest.approx(expected, rel=1e-12)


@pytest.mark.parametrize('omega', [0.0, -0.5, float('nan'), float('inf')])
def testSingularAtNonPositiveOmega(spectrum, omega):
    with pytest.raises(SingularEvaluationError):
        spectrum.density(omega)


def testTinyOmegaUnderflowsToZero(spectrum):
    assert spectrum.density(1e-3) == 0.0


def testBatchMatchesScalar(spectrum):
    omegas = [0.3, 0.8, 0.81, 1.7, 2.9]
    batch = spectrum.densityBatch(omegas)
    assert batch.shape == (5,)
    for omega, value in zip(omegas, batch):
        assert value == pytest.approx(spectrum.density(omega), rel=1e-12)


def testBatchEmpty(spectrum):
    assert spectrum.densityBatch([]).size == 0


def testBatchRejectsWholeSequence(spectrum):
    with pytest.raises(SingularEvaluationError):
        spectrum.densityBatch([0.5, 0.0, 1.0])


def testCallableAlias(spectrum):
    np.testing.assert_allclose(spectrum([0.5, 1.0]), spectrum.densityBatch([0.5, 1.0]))
