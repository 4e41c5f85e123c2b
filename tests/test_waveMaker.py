'''
Tests for the SpectralWaveMaker pipeline facade.
'''

import math

import pytest

from jonswapWaveMaker import SpectralWaveMaker, UniformBoundaryStrategy, RandomBoundaryStrategy
from jonswapWaveMaker.errors import InvalidParameterError, WaveMakerError


@pytest.fixture
def waveMaker():
    return SpectralWaveMaker.fromParameters(0.0081, 0.8, 3.0, 3.3, 0.07, 0.09)


def testAccessors(waveMaker):
    assert waveMaker.alpha == 0.0081
    assert waveMaker.peakFrequency == 0.8
    assert waveMaker.maxFrequency == 3.0
    assert waveMaker.peakSharpening == 3.3
    assert waveMaker.sigmaLow == 0.07
    assert waveMaker.sigmaHigh == 0.09
    assert waveMaker.windSpeed10m is None
    assert waveMaker.fetch is None
    assert waveMaker.boundaries == ()
    assert waveMaker.centerFrequencies == ()
    assert waveMaker.energies is None
    assert waveMaker.amplitudes is None


def testDensityDelegates(waveMaker):
    assert waveMaker.density(0.8) == pytest.approx(waveMaker.spectrum.density(0.8))
    assert waveMaker.densityBatch([0.5, 1.0]).shape == (2,)


def testFullPipelineTotalEnergy(waveMaker):
    waveMaker.generateBins(10, RandomBoundaryStrategy(rng=42))
    waveMaker.integrateBins(dx=0.01)
    strokes = waveMaker.computePaddleAmplitudes(1.0, maxStroke=0.75, policy='totalEnergy')

    assert len(strokes.amplitudes) == 10
    assert math.fsum(strokes.amplitudes) == pytest.approx(0.75, rel=1e-12)
    assert all(a >= 0.0 for a in strokes.amplitudes)


def testFullPipelineTransferFunction(waveMaker):
    waveMaker.generateBins(10, UniformBoundaryStrategy())
    waveMaker.integrateBins(dx=0.01)
    strokes = waveMaker.computePaddleAmplitudes(1.0, kinematics='flap', maxStroke=0.3)

    assert strokes.peak == pytest.approx(0.3)
    assert strokes.kinematics == 'flap'
    assert strokes.centerFrequencies == waveMaker.centerFrequencies


def testStagesMustRunInOrder(waveMaker):
    with pytest.raises(RuntimeError):
        waveMaker.integrateBins(dx=0.01)

    waveMaker.generateBins(5, UniformBoundaryStrategy())
    with pytest.raises(RuntimeError):
        waveMaker.computePaddleAmplitudes(1.0)


def testRegeneratingBinsDiscardsResults(waveMaker):
    waveMaker.generateBins(5, UniformBoundaryStrategy())
    waveMaker.integrateBins(dx=0.01)
    waveMaker.computePaddleAmplitudes(1.0)

    waveMaker.generateBins(6, UniformBoundaryStrategy())
    assert waveMaker.energies is None
    assert waveMaker.amplitudes is None
    assert len(waveMaker.boundaries) == 5


def testInvalidInputsPropagate(waveMaker):
    with pytest.raises(InvalidParameterError):
        waveMaker.generateBins(0, UniformBoundaryStrategy())

    waveMaker.generateBins(5, UniformBoundaryStrategy())
    with pytest.raises(WaveMakerError):
        waveMaker.integrateBins(dx=0.0)


def testFromWindFetch():
    waveMaker = SpectralWaveMaker.fromWindFetch(10.0, 1.0e5)
    assert waveMaker.windSpeed10m == 10.0
    assert waveMaker.fetch == 1.0e5
    assert waveMaker.parameters.isWindDerived


def testSummary(waveMaker):
    assert waveMaker.summary()['numberOfBins'] == 0

    waveMaker.generateBins(4, UniformBoundaryStrategy())
    waveMaker.integrateBins(dx=0.01)
    waveMaker.computePaddleAmplitudes(1.0, maxStroke=0.5)

    summary = waveMaker.summary()
    assert summary['numberOfBins'] == 4
    assert len(summary['boundaries']) == 3
    assert len(summary['energies']) == 4
    assert len(summary['amplitudes']) == 4
    assert summary['parameters']['alpha'] == 0.0081
    assert summary['paddlePolicy'] == 'transferFunction'
    assert 'nBins=4' in repr(waveMaker)
