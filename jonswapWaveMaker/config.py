# -- Wave Maker Run Configuration -- #

'''
Run configuration for the spectral wave-maker pipeline.

JSON layout (all sections optional):

    {
        "spectrum":    {"alpha": ..., "peakFrequency": ..., "maxFrequency": ...,
                        "peakSharpening": ..., "sigmaLow": ..., "sigmaHigh": ...}
                    or {"windSpeed10m": ..., "fetch": ...},
        "bins":        {"numberOfBins": 10, "strategy": "random", "seed": 42,
                        "spread": "wide", "band": "peak", "jitterFraction": 0.025},
        "integration": {"dx": 0.01, "policy": "raw"},
        "paddle":      {"waterDepth": 1.0, "kinematics": "piston", "dispersion": "approximate",
                        "policy": "transferFunction", "maxStroke": 0.75, "normalization": "peak"},
        "export":      {"tableStart": 0.001, "tableStop": 3.0, "tableStep": 0.001}
    }
'''

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional

from jonswapWaveMaker import constants as const
from jonswapWaveMaker.errors import InvalidParameterError
from jonswapWaveMaker.spectrum.parameters import SpectrumParameters
from jonswapWaveMaker.binning.boundaries import (
    BoundaryStrategy,
    RandomBoundaryStrategy,
    UniformBoundaryStrategy,
)


@dataclass
class WaveMakerConfig:
    '''
    Configuration for one spectrum-to-stroke run.

    Either the explicit spectrum parameters (alpha, peakFrequency,
    maxFrequency) or windSpeed10m and fetch must be set.

    Parameters:
    -----------
    alpha, peakFrequency, maxFrequency : float, optional
        Explicit JONSWAP parameters
    peakSharpening, sigmaLow, sigmaHigh : float
        JONSWAP shape parameters (explicit path only)
    windSpeed10m, fetch : float, optional
        Wind speed [m/s] and fetch [m] for the derived path
    numberOfBins : int
        Number of frequency bins
    strategy : str
        'random' or 'uniform'
    seed : int, optional
        Seed for the boundary random source
    spread, band : str
        Random strategy settings
    jitterFraction : float
        Uniform strategy jitter bound, fraction of bin width
    dx : float
        Integration step [rad/s]
    integrationPolicy : str
        'raw' or 'widthNormalized'
    waterDepth : float
        Water depth at the paddle [m]
    kinematics : str
        'piston' or 'flap'
    dispersion : str
        'approximate' or 'exact'
    paddlePolicy : str
        'transferFunction' or 'totalEnergy'
    maxStroke : float, optional
        Stroke to normalize to [m]
    normalization : str
        'peak' or 'sum'
    tableStart, tableStop, tableStep : float
        Sampling range of the exported spectrum table [rad/s]
    '''

    alpha: Optional[float] = None
    peakFrequency: Optional[float] = None
    maxFrequency: Optional[float] = None
    peakSharpening: float = const.defaultPeakSharpening
    sigmaLow: float = const.defaultSigmaLow
    sigmaHigh: float = const.defaultSigmaHigh
    windSpeed10m: Optional[float] = None
    fetch: Optional[float] = None

    numberOfBins: int = 10
    strategy: str = 'random'
    seed: Optional[int] = None
    spread: str = 'wide'
    band: str = 'peak'
    jitterFraction: float = const.defaultJitterFraction

    dx: float = 0.01
    integrationPolicy: str = 'raw'

    waterDepth: float = 1.0
    kinematics: str = 'piston'
    dispersion: str = 'approximate'
    paddlePolicy: str = 'transferFunction'
    maxStroke: Optional[float] = 0.75
    normalization: str = 'peak'

    tableStart: float = 0.001
    tableStop: float = 3.0
    tableStep: float = 0.001

    ######################################################################
    # -- Presets -- #
    ######################################################################

    @classmethod
    def referenceCase(cls) -> WaveMakerConfig:
        '''
        Open-ocean reference spectrum.
        alpha=0.0081, wp=0.8 rad/s, wmax=3.0 rad/s, deterministic bins.
        '''
        return cls(
            alpha=0.0081,
            peakFrequency=0.8,
            maxFrequency=3.0,
            numberOfBins=10,
            strategy='uniform',
            waterDepth=1.0,
        )

    @classmethod
    def labFlume(cls) -> WaveMakerConfig:
        '''
        Laboratory flume, Tp ~ 1.6 s in 0.8 m of water.
        Random bins around the peak, piston paddle with 0.3 m stroke.
        '''
        return cls(
            alpha=0.0081,
            peakFrequency=4.0,
            maxFrequency=12.0,
            numberOfBins=12,
            strategy='random',
            seed=2015,
            waterDepth=0.8,
            kinematics='piston',
            maxStroke=0.3,
            tableStop=12.0,
        )

    @classmethod
    def windSea(cls) -> WaveMakerConfig:
        '''
        Fetch-limited wind sea, U10 = 10 m/s over 100 km.
        Flap paddle, total-energy normalization to 0.75 m.
        '''
        return cls(
            windSpeed10m=10.0,
            fetch=100_000.0,
            numberOfBins=10,
            strategy='random',
            seed=7,
            waterDepth=2.0,
            kinematics='flap',
            paddlePolicy='totalEnergy',
            maxStroke=0.75,
            tableStop=5.0,
        )

    ######################################################################
    # -- Builders -- #
    ######################################################################

    def buildParameters(self) -> SpectrumParameters:
        '''SpectrumParameters from the explicit or the wind/fetch fields.'''
        if self.windSpeed10m is not None or self.fetch is not None:
            if self.windSpeed10m is None or self.fetch is None:
                raise InvalidParameterError('windSpeed10m and fetch must be given together')
            return SpectrumParameters.fromWindFetch(self.windSpeed10m, self.fetch)

        if self.alpha is None or self.peakFrequency is None or self.maxFrequency is None:
            raise InvalidParameterError(
                'Either alpha, peakFrequency and maxFrequency, or windSpeed10m and fetch are required'
            )
        return SpectrumParameters(
            alpha=self.alpha,
            peakFrequency=self.peakFrequency,
            maxFrequency=self.maxFrequency,
            peakSharpening=self.peakSharpening,
            sigmaLow=self.sigmaLow,
            sigmaHigh=self.sigmaHigh,
        )

    def buildStrategy(self) -> BoundaryStrategy:
        '''Boundary strategy with its own seeded random source.'''
        if self.strategy == 'random':
            return RandomBoundaryStrategy(rng=self.seed, spread=self.spread, band=self.band)
        if self.strategy == 'uniform':
            return UniformBoundaryStrategy(jitterFraction=self.jitterFraction)
        raise InvalidParameterError(f"strategy must be 'random' or 'uniform', got {self.strategy!r}")

    ######################################################################
    # -- JSON -- #
    ######################################################################

    @classmethod
    def fromDict(cls, data: dict) -> WaveMakerConfig:
        '''Build from the sectioned dict layout described in the module docstring.'''
        spectrumSection = data.get('spectrum', {})
        binsSection = data.get('bins', {})
        integrationSection = data.get('integration', {})
        paddleSection = data.get('paddle', {})
        exportSection = data.get('export', {})

        defaults = cls()

        return cls(
            alpha=spectrumSection.get('alpha'),
            peakFrequency=spectrumSection.get('peakFrequency'),
            maxFrequency=spectrumSection.get('maxFrequency'),
            peakSharpening=spectrumSection.get('peakSharpening', defaults.peakSharpening),
            sigmaLow=spectrumSection.get('sigmaLow', defaults.sigmaLow),
            sigmaHigh=spectrumSection.get('sigmaHigh', defaults.sigmaHigh),
            windSpeed10m=spectrumSection.get('windSpeed10m'),
            fetch=spectrumSection.get('fetch'),
            numberOfBins=binsSection.get('numberOfBins', defaults.numberOfBins),
            strategy=binsSection.get('strategy', defaults.strategy),
            seed=binsSection.get('seed'),
            spread=binsSection.get('spread', defaults.spread),
            band=binsSection.get('band', defaults.band),
            jitterFraction=binsSection.get('jitterFraction', defaults.jitterFraction),
            dx=integrationSection.get('dx', defaults.dx),
            integrationPolicy=integrationSection.get('policy', defaults.integrationPolicy),
            waterDepth=paddleSection.get('waterDepth', defaults.waterDepth),
            kinematics=paddleSection.get('kinematics', defaults.kinematics),
            dispersion=paddleSection.get('dispersion', defaults.dispersion),
            paddlePolicy=paddleSection.get('policy', defaults.paddlePolicy),
            maxStroke=paddleSection.get('maxStroke', defaults.maxStroke),
            normalization=paddleSection.get('normalization', defaults.normalization),
            tableStart=exportSection.get('tableStart', defaults.tableStart),
            tableStop=exportSection.get('tableStop', defaults.tableStop),
            tableStep=exportSection.get('tableStep', defaults.tableStep),
        )

    @classmethod
    def fromJson(cls, configPath: str) -> WaveMakerConfig:
        '''
        Load configuration from a JSON file.

        Parameters:
        -----------
        configPath : str
            Path to the JSON configuration file

        Returns:
        --------
        WaveMakerConfig : Loaded configuration
        '''
        with open(configPath, 'r') as f:
            data = json.load(f)
        return cls.fromDict(data)

    def asDict(self) -> dict:
        '''Sectioned dict in the layout read by fromDict / fromJson.'''
        return {
            'spectrum': {
                'alpha': self.alpha,
                'peakFrequency': self.peakFrequency,
                'maxFrequency': self.maxFrequency,
                'peakSharpening': self.peakSharpening,
                'sigmaLow': self.sigmaLow,
                'sigmaHigh': self.sigmaHigh,
                'windSpeed10m': self.windSpeed10m,
                'fetch': self.fetch,
            },
            'bins': {
                'numberOfBins': self.numberOfBins,
                'strategy': self.strategy,
                'seed': self.seed,
                'spread': self.spread,
                'band': self.band,
                'jitterFraction': self.jitterFraction,
            },
            'integration': {
                'dx': self.dx,
                'policy': self.integrationPolicy,
            },
            'paddle': {
                'waterDepth': self.waterDepth,
                'kinematics': self.kinematics,
                'dispersion': self.dispersion,
                'policy': self.paddlePolicy,
                'maxStroke': self.maxStroke,
                'normalization': self.normalization,
            },
            'export': {
                'tableStart': self.tableStart,
                'tableStop': self.tableStop,
                'tableStep': self.tableStep,
            },
        }

    def toJson(self, configPath: str) -> str:
        '''Write the configuration as JSON readable by fromJson. Returns the path.'''
        with open(configPath, 'w') as f:
            json.dump(self.asDict(), f, indent=4)
        return configPath
