'''
Tests for per-bin trapezoidal integration.
'''

import numpy as np
import pytest

from jonswapWaveMaker.errors import InvalidParameterError
from jonswapWaveMaker.binning.boundaries import (
    BinBoundaryGenerator,
    BinSet,
    RandomBoundaryStrategy,
    UniformBoundaryStrategy,
)
from jonswapWaveMaker.binning.integrator import BinIntegrator, trapezoid


class LinearDensity:
    '''S(omega) = 2*omega, integrated exactly by the trapezoid rule.'''

    def density(self, omega):
        return 2.0 * omega

    def densityBatch(self, omegas):
        return 2.0 * np.asarray(omegas, dtype=float)


def testTrapezoidIsExactForLinearDensity():
    # 0.3 does not divide the interval, so the last step is shortened
    assert trapezoid(LinearDensity(), 1.0, 2.0, 0.3) == pytest.approx(3.0, rel=1e-12)


def testTrapezoidEmptyInterval(spectrum):
    assert trapezoid(spectrum, 1.0, 1.0, 0.01) == 0.0


def testRawEnergiesSumToTotalArea(rawEnergies, uniformBins):
    assert rawEnergies.numberOfBins == uniformBins.numberOfBins
    assert rawEnergies.totalArea == pytest.approx(sum(rawEnergies.energies), rel=1e-12)
    assert all(e >= 0.0 for e in rawEnergies.energies)
    assert rawEnergies.centerFrequencies == uniformBins.centerFrequencies


def testTotalAreaMatchesFineIntegral(spectrum, rawEnergies):
    reference = trapezoid(spectrum, 0.01, 3.0, 1e-4)
    assert rawEnergies.totalArea == pytest.approx(reference, rel=1e-2)


def testTotalAreaIndependentOfBinning(spectrum, referenceParameters, rawEnergies):
    fewBins = BinBoundaryGenerator(referenceParameters).generateBins(3, UniformBoundaryStrategy())
    other = BinIntegrator(spectrum).integrateBins(fewBins, dx=0.01)
    assert other.totalArea == pytest.approx(rawEnergies.totalArea, rel=1e-2)


def testPeakBinHoldsMostEnergy(rawEnergies, uniformBins):
    peakBin = int(np.argmax(rawEnergies.energies))
    low, high = uniformBins.binRanges()[peakBin]
    assert low <= 0.8 < high


def testWidthNormalizedEnergies(spectrum, uniformBins, rawEnergies):
    normalized = BinIntegrator(spectrum).integrateBins(uniformBins, dx=0.01, policy='widthNormalized')

    assert normalized.policy == 'widthNormalized'
    assert normalized.totalArea == pytest.approx(rawEnergies.totalArea, rel=1e-12)
    np.testing.assert_allclose(
        np.asarray(normalized.energies) * uniformBins.widths, rawEnergies.energies, rtol=1e-12
    )
    np.testing.assert_allclose(normalized.areas, rawEnergies.areas, rtol=1e-12)


def testSingleBinIntegratesWholeRange(spectrum):
    binSet = BinSet.fromBoundaries([], 3.0)
    energies = BinIntegrator(spectrum).integrateBins(binSet, dx=0.01)
    assert energies.numberOfBins == 1
    assert energies.energies[0] == pytest.approx(trapezoid(spectrum, 0.01, 3.0, 0.01), rel=1e-12)


@pytest.mark.parametrize('dx', [0.0, -0.01, float('nan'), float('inf'), None, True])
def testRejectsInvalidStep(spectrum, uniformBins, dx):
    with pytest.raises(InvalidParameterError):
        BinIntegrator(spectrum).integrateBins(uniformBins, dx=dx)


def testFirstBinBelowStepHasZeroArea(spectrum):
    binSet = BinSet.fromBoundaries([0.005, 1.0], 3.0)
    energies = BinIntegrator(spectrum).integrateBins(binSet, dx=0.01)

    assert energies.energies[0] == 0.0
    assert energies.energies[1] == pytest.approx(trapezoid(spectrum, 0.005, 1.0, 0.01), rel=1e-12)
    assert energies.totalArea == pytest.approx(sum(energies.energies), rel=1e-12)


@pytest.mark.parametrize('seed', range(200))
def testSpectrumBandRandomBinsIntegrate(spectrum, referenceParameters, seed):
    # Draws over the whole (0, wmax) band may put the first edge below dx
    binSet = BinBoundaryGenerator(referenceParameters).generateBins(
        10, RandomBoundaryStrategy(rng=seed, band='spectrum')
    )
    energies = BinIntegrator(spectrum).integrateBins(binSet, dx=0.01)

    assert energies.numberOfBins == 10
    assert all(e >= 0.0 for e in energies.energies)
    assert energies.totalArea > 0.0


def testStepWiderThanFirstBin(spectrum, uniformBins):
    energies = BinIntegrator(spectrum).integrateBins(uniformBins, dx=0.5)
    assert energies.energies[0] == 0.0
    assert energies.numberOfBins == uniformBins.numberOfBins


def testRejectsUnknownPolicy(spectrum, uniformBins):
    with pytest.raises(InvalidParameterError):
        BinIntegrator(spectrum).integrateBins(uniformBins, dx=0.01, policy='mean')


def testRejectsMissingBins(spectrum):
    with pytest.raises(InvalidParameterError):
        BinIntegrator(spectrum).integrateBins(None, dx=0.01)
