# -- Paddle Transfer Functions -- #

'''
Converts per-bin spectral energy into wavemaker paddle stroke amplitudes.

For each bin with energy E, width dw and centre frequency omega:

    kh        = dispersion(omega, h)
    a_wave    = sqrt(2 * E * dw)
    a_paddle  = a_wave / (H/S)

with the Biesel wave-height to stroke ratio H/S:

    piston:  2 * (cosh(2kh) - 1) / (sinh(2kh) + 2kh)
    flap:    4 * (sinh(kh)/kh) * (kh*sinh(kh) - cosh(kh) + 1) / (sinh(2kh) + 2kh)

Deep water (2kh > 50) uses the limits H/S -> 2 (piston) and
H/S -> 2*(1 - 1/kh) (flap). Shallow water (kh -> 0) sends both ratios
to zero; kh below constants.minimumWaveNumberDepth raises
SingularEvaluationError.

Two conversion policies are available:
- 'transferFunction': bin-by-bin division by H/S, optionally rescaled so
  the peak (or sum) stroke equals maxStroke
- 'totalEnergy': a_i = E_i / sum(E) * maxStroke, so sum(a) == maxStroke

References:
-----------
Biesel (1951) -- Wave maker theory
Dean, R.G. & Dalrymple, R.A. -- Water Wave Mechanics, Ch. 6
'''

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Literal, Optional

from jonswapWaveMaker import constants as c
from jonswapWaveMaker.errors import InvalidParameterError, SingularEvaluationError
from jonswapWaveMaker.binning.integrator import BinEnergies
from jonswapWaveMaker.paddle.dispersion import approximateWaveNumberDepth, exactWaveNumberDepth

logger = logging.getLogger(__name__)

Kinematics = Literal['piston', 'flap']
ConversionPolicy = Literal['transferFunction', 'totalEnergy']
Normalization = Literal['peak', 'sum']


######################################################################
# -- Biesel Transfer Ratios -- #
######################################################################

def _checkKh(kh: float) -> None:
    if not math.isfinite(kh) or kh < c.minimumWaveNumberDepth:
        raise SingularEvaluationError(
            f'kh={kh:.3g} is below {c.minimumWaveNumberDepth:g}; the transfer '
            f'function is singular for very shallow water or low frequency'
        )


def pistonTransferRatio(kh: float) -> float:
    '''
    Wave height to stroke ratio H/S for a piston wavemaker.

    Parameters:
    -----------
    kh : float
        Wavenumber-depth product [-]

    Returns:
    --------
    float : H/S [-]
    '''
    _checkKh(kh)
    twoKh = 2.0 * kh

    if twoKh > c.deepWaterLimit:
        return 2.0

    return 2.0 * (math.cosh(twoKh) - 1.0) / (math.sinh(twoKh) + twoKh)


def flapTransferRatio(kh: float) -> float:
    '''
    Wave height to stroke ratio H/S for a bottom-hinged flap wavemaker.

    Parameters:
    -----------
    kh : float
        Wavenumber-depth product [-]

    Returns:
    --------
    float : H/S [-]
    '''
    _checkKh(kh)
    twoKh = 2.0 * kh

    if twoKh > c.deepWaterLimit:
        return 2.0 * (1.0 - 1.0 / kh)

    sinhKh = math.sinh(kh)
    return (
        4.0 * (sinhKh / kh) * (kh * sinhKh - math.cosh(kh) + 1.0)
        / (math.sinh(twoKh) + twoKh)
    )


TRANSFER_RATIOS = {
    'piston': pistonTransferRatio,
    'flap': flapTransferRatio,
}

DISPERSION_SOLVERS = {
    'approximate': approximateWaveNumberDepth,
    'exact': exactWaveNumberDepth,
}


######################################################################
# -- Paddle Amplitudes -- #
######################################################################

@dataclass(frozen=True)
class PaddleAmplitudes:
    '''
    Paddle stroke amplitude per bin, aligned with BinEnergies.

    Parameters:
    -----------
    amplitudes : tuple[float, ...]
        Stroke amplitude per bin [m]
    centerFrequencies : tuple[float, ...]
        Bin centre frequencies [rad/s]
    transferRatios : tuple[float, ...]
        H/S per bin (empty for the 'totalEnergy' policy)
    kinematics : str
        'piston' or 'flap'
    policy : str
        'transferFunction' or 'totalEnergy'
    maxStroke : float, optional
        Stroke the sequence was normalized to [m]
    normalization : str, optional
        'peak' or 'sum' when a transfer-function result was rescaled
    '''

    amplitudes: tuple[float, ...]
    centerFrequencies: tuple[float, ...]
    transferRatios: tuple[float, ...]
    kinematics: str
    policy: str
    maxStroke: Optional[float] = None
    normalization: Optional[str] = None

    @property
    def total(self) -> float:
        return float(sum(self.amplitudes))

    @property
    def peak(self) -> float:
        return float(max(self.amplitudes)) if self.amplitudes else 0.0


class PaddleTransfer:
    '''
    Linear-wave-theory conversion of bin energy to paddle stroke.

    Parameters:
    -----------
    waterDepth : float
        Still water depth at the paddle h [m]
    kinematics : str
        'piston' or 'flap'
    dispersion : str
        'approximate' (explicit kh formula) or 'exact' (Newton-Raphson)
    '''

    def __init__(
        self,
        waterDepth: float,
        kinematics: Kinematics = 'piston',
        dispersion: Literal['approximate', 'exact'] = 'approximate',
    ) -> None:
        if isinstance(waterDepth, bool) or not isinstance(waterDepth, numbers.Real) \
                or not math.isfinite(waterDepth) or waterDepth <= 0.0:
            raise InvalidParameterError(f'Water depth must be a finite positive number, got {waterDepth!r}')
        if kinematics not in TRANSFER_RATIOS:
            raise InvalidParameterError(f"kinematics must be 'piston' or 'flap', got {kinematics!r}")
        if dispersion not in DISPERSION_SOLVERS:
            raise InvalidParameterError(f"dispersion must be 'approximate' or 'exact', got {dispersion!r}")

        self._depth = float(waterDepth)
        self._kinematics = kinematics
        self._ratio = TRANSFER_RATIOS[kinematics]
        self._dispersion = DISPERSION_SOLVERS[dispersion]

    @property
    def waterDepth(self) -> float:
        return self._depth

    @property
    def kinematics(self) -> str:
        return self._kinematics

    def waveNumberDepth(self, omega: float) -> float:
        '''kh at angular frequency omega for this water depth.'''
        return self._dispersion(omega, self._depth)

    def transferRatio(self, omega: float) -> float:
        '''H/S at angular frequency omega.'''
        return self._ratio(self.waveNumberDepth(omega))

    def computeAmplitudes(
        self,
        binEnergies: BinEnergies,
        policy: ConversionPolicy = 'transferFunction',
        maxStroke: Optional[float] = None,
        normalization: Normalization = 'peak',
    ) -> PaddleAmplitudes:
        '''
        Paddle stroke amplitude for every bin.

        Parameters:
        -----------
        binEnergies : BinEnergies
            Integrated energy per bin
        policy : str
            'transferFunction' or 'totalEnergy'
        maxStroke : float, optional
            Stroke to normalize to [m]; required for 'totalEnergy'
        normalization : str
            'peak' (largest amplitude == maxStroke) or 'sum' (sum == maxStroke),
            used by 'transferFunction' when maxStroke is given

        Returns:
        --------
        PaddleAmplitudes : Stroke amplitudes aligned with the bins
        '''
        if policy not in ('transferFunction', 'totalEnergy'):
            raise InvalidParameterError(
                f"policy must be 'transferFunction' or 'totalEnergy', got {policy!r}"
            )
        if normalization not in ('peak', 'sum'):
            raise InvalidParameterError(f"normalization must be 'peak' or 'sum', got {normalization!r}")
        if maxStroke is not None and (not math.isfinite(maxStroke) or maxStroke <= 0.0):
            raise InvalidParameterError(f'maxStroke must be a finite positive number, got {maxStroke}')

        if policy == 'totalEnergy':
            return self._totalEnergyAmplitudes(binEnergies, maxStroke)

        ratios = []
        amplitudes = []
        for energy, width, omega in zip(
            binEnergies.energies, binEnergies.widths, binEnergies.centerFrequencies
        ):
            ratio = self.transferRatio(omega)
            waveAmplitude = math.sqrt(2.0 * energy * width)
            ratios.append(ratio)
            amplitudes.append(waveAmplitude / ratio)
            logger.debug(
                'omega=%.4f: a_wave=%.5e, H/S=%.4f, stroke=%.5e',
                omega, waveAmplitude, ratio, amplitudes[-1],
            )

        if maxStroke is not None:
            reference = max(amplitudes) if normalization == 'peak' else sum(amplitudes)
            if reference <= 0.0:
                raise SingularEvaluationError('Cannot normalize strokes: all amplitudes are zero')
            scale = maxStroke / reference
            amplitudes = [a * scale for a in amplitudes]

        return PaddleAmplitudes(
            amplitudes=tuple(amplitudes),
            centerFrequencies=binEnergies.centerFrequencies,
            transferRatios=tuple(ratios),
            kinematics=self._kinematics,
            policy=policy,
            maxStroke=maxStroke,
            normalization=normalization if maxStroke is not None else None,
        )

    def _totalEnergyAmplitudes(
        self, binEnergies: BinEnergies, maxStroke: Optional[float]
    ) -> PaddleAmplitudes:
        '''a_i = E_i / sum(E) * maxStroke'''
        if maxStroke is None:
            raise InvalidParameterError("The 'totalEnergy' policy requires maxStroke")

        totalEnergy = sum(binEnergies.energies)
        if totalEnergy <= 0.0:
            raise SingularEvaluationError('Cannot normalize strokes: total bin energy is zero')

        amplitudes = tuple(e / totalEnergy * maxStroke for e in binEnergies.energies)
        logger.info('Total-energy normalization: sum(E)=%.6e, maxStroke=%.4g', totalEnergy, maxStroke)

        return PaddleAmplitudes(
            amplitudes=amplitudes,
            centerFrequencies=binEnergies.centerFrequencies,
            transferRatios=(),
            kinematics=self._kinematics,
            policy='totalEnergy',
            maxStroke=maxStroke,
        )
