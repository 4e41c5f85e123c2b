'''
Tests for the dispersion relation and the piston/flap paddle transfer.
'''

import math

import pytest

from jonswapWaveMaker.errors import InvalidParameterError, SingularEvaluationError
from jonswapWaveMaker.binning.integrator import BinEnergies
from jonswapWaveMaker.paddle.dispersion import (
    approximateWaveNumberDepth,
    exactWaveNumberDepth,
    solveDispersionRelation,
)
from jonswapWaveMaker.paddle.transfer import (
    PaddleTransfer,
    flapTransferRatio,
    pistonTransferRatio,
)


@pytest.fixture
def twoBins():
    return BinEnergies(
        energies=(0.1, 0.2),
        centerFrequencies=(2.0, 4.0),
        widths=(1.0, 1.0),
        totalArea=0.3,
        policy='raw',
    )


# -- Dispersion -- #

@pytest.mark.parametrize('omega, depth', [(0.5, 1.0), (2.0, 1.0), (5.0, 0.8), (1.0, 50.0)])
def testExactSolutionSatisfiesDispersion(omega, depth):
    k = solveDispersionRelation(omega, depth)
    assert omega ** 2 == pytest.approx(9.81 * k * math.tanh(k * depth), rel=1e-10)


@pytest.mark.parametrize('omega, depth', [(0.5, 1.0), (2.0, 1.0), (5.0, 0.8), (1.0, 50.0)])
def testApproximationIsClose(omega, depth):
    assert approximateWaveNumberDepth(omega, depth) == pytest.approx(
        exactWaveNumberDepth(omega, depth), rel=1e-2
    )


def testDeepWaterWaveNumber():
    omega, depth = 10.0, 10.0
    assert solveDispersionRelation(omega, depth) == pytest.approx(omega ** 2 / 9.81, rel=1e-8)


@pytest.mark.parametrize('omega, depth', [(0.0, 1.0), (-1.0, 1.0), (1.0, 0.0), (1.0, float('nan'))])
def testDispersionRejectsInvalid(omega, depth):
    with pytest.raises(InvalidParameterError):
        approximateWaveNumberDepth(omega, depth)


# -- Transfer ratios -- #

def testPistonDeepWaterLimit():
    assert pistonTransferRatio(30.0) == 2.0
    assert pistonTransferRatio(24.9) == pytest.approx(2.0, rel=1e-9)


def testFlapDeepWaterLimit():
    assert flapTransferRatio(30.0) == pytest.approx(2.0 * (1.0 - 1.0 / 30.0))
    assert flapTransferRatio(24.9) == pytest.approx(2.0 * (1.0 - 1.0 / 24.9), rel=1e-9)


def testShallowWaterLimits():
    # H/S -> kh (piston) and kh/2 (flap) as kh -> 0
    assert pistonTransferRatio(0.01) == pytest.approx(0.01, rel=1e-3)
    assert flapTransferRatio(0.01) == pytest.approx(0.005, rel=1e-3)


def testPistonExceedsFlap():
    for kh in (0.1, 0.5, 1.0, 3.0):
        assert pistonTransferRatio(kh) > flapTransferRatio(kh)


@pytest.mark.parametrize('kh', [0.0, 1e-6, -1.0, float('nan')])
def testTransferSingularForVanishingKh(kh):
    with pytest.raises(SingularEvaluationError):
        pistonTransferRatio(kh)
    with pytest.raises(SingularEvaluationError):
        flapTransferRatio(kh)


# -- PaddleTransfer -- #

@pytest.mark.parametrize('kwargs', [
    {'waterDepth': 0.0},
    {'waterDepth': -1.0},
    {'waterDepth': 1.0, 'kinematics': 'plunger'},
    {'waterDepth': 1.0, 'dispersion': 'iterative'},
])
def testPaddleTransferRejectsOptions(kwargs):
    with pytest.raises(InvalidParameterError):
        PaddleTransfer(**kwargs)


def testExactDispersionOption():
    transfer = PaddleTransfer(1.0, dispersion='exact')
    assert transfer.waveNumberDepth(2.0) == pytest.approx(exactWaveNumberDepth(2.0, 1.0))


def testTransferFunctionAmplitudes(twoBins):
    transfer = PaddleTransfer(1.0, kinematics='piston')
    result = transfer.computeAmplitudes(twoBins)

    for amp, ratio, energy, omega in zip(
        result.amplitudes, result.transferRatios, twoBins.energies, twoBins.centerFrequencies
    ):
        assert ratio == pytest.approx(transfer.transferRatio(omega))
        assert amp == pytest.approx(math.sqrt(2.0 * energy * 1.0) / ratio)

    assert result.policy == 'transferFunction'
    assert result.kinematics == 'piston'
    assert result.maxStroke is None
    assert result.normalization is None


def testPeakNormalization(twoBins):
    result = PaddleTransfer(1.0).computeAmplitudes(twoBins, maxStroke=0.5, normalization='peak')
    assert result.peak == pytest.approx(0.5)
    assert result.normalization == 'peak'


def testSumNormalization(twoBins):
    result = PaddleTransfer(1.0, kinematics='flap').computeAmplitudes(
        twoBins, maxStroke=0.5, normalization='sum'
    )
    assert result.total == pytest.approx(0.5)


def testNormalizationKeepsRatios(twoBins):
    transfer = PaddleTransfer(1.0)
    raw = transfer.computeAmplitudes(twoBins)
    scaled = transfer.computeAmplitudes(twoBins, maxStroke=0.5)
    assert scaled.amplitudes[0] / scaled.amplitudes[1] == pytest.approx(
        raw.amplitudes[0] / raw.amplitudes[1]
    )


def testTotalEnergyPolicy(twoBins):
    result = PaddleTransfer(1.0).computeAmplitudes(twoBins, policy='totalEnergy', maxStroke=0.75)
    assert result.total == pytest.approx(0.75)
    assert result.amplitudes == pytest.approx((0.25, 0.5))
    assert result.transferRatios == ()


def testTotalEnergyRequiresMaxStroke(twoBins):
    with pytest.raises(InvalidParameterError):
        PaddleTransfer(1.0).computeAmplitudes(twoBins, policy='totalEnergy')


def testTotalEnergyZeroEnergyIsSingular():
    zeros = BinEnergies((0.0, 0.0), (1.0, 2.0), (1.0, 1.0), 0.0, 'raw')
    with pytest.raises(SingularEvaluationError):
        PaddleTransfer(1.0).computeAmplitudes(zeros, policy='totalEnergy', maxStroke=0.75)


@pytest.mark.parametrize('kwargs', [
    {'policy': 'linear'},
    {'normalization': 'mean'},
    {'maxStroke': 0.0},
    {'maxStroke': -0.2},
])
def testComputeAmplitudesRejectsOptions(twoBins, kwargs):
    with pytest.raises(InvalidParameterError):
        PaddleTransfer(1.0).computeAmplitudes(twoBins, **kwargs)


def testRatiosPositiveAtSmallestAcceptedKh():
    assert pistonTransferRatio(1.0e-4) == pytest.approx(1.0e-4, rel=1e-6)
    assert flapTransferRatio(1.0e-4) == pytest.approx(5.0e-5, rel=1e-6)


def testTransferRatioAtLowFrequency():
    # omega = 3e-4 rad/s in 1 m of water gives kh just below 1e-4
    transfer = PaddleTransfer(1.0)
    assert transfer.transferRatio(4.0e-4) > 0.0
    with pytest.raises(SingularEvaluationError):
        transfer.transferRatio(3.0e-4)
