# -- Spectral Wave Maker Runner -- #

'''
Command-line entry point for computing paddle strokes from a JONSWAP spectrum.

Builds the spectrum, generates the frequency bins, integrates them,
converts the bin energies into paddle strokes and prints a report.
Optionally writes the sampled spectrum table and an HTML plot.

Usage:
    python -m jonswapWaveMaker                                 # Reference case
    python -m jonswapWaveMaker --preset labFlume
    python -m jonswapWaveMaker --config configs/jonswap_default.json
    python -m jonswapWaveMaker --bins 20 --strategy random --seed 3 --table
'''

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace
from typing import Optional

from jonswapWaveMaker.config import WaveMakerConfig
from jonswapWaveMaker.errors import WaveMakerError
from jonswapWaveMaker.waveMaker import SpectralWaveMaker
from jonswapWaveMaker.export.spectrumTable import writeSpectrumTable

logger = logging.getLogger(__name__)

PRESETS = {
    'reference': WaveMakerConfig.referenceCase,
    'labFlume': WaveMakerConfig.labFlume,
    'windSea': WaveMakerConfig.windSea,
}


#--------------------------------------------------------------------#
# -- CLI Argument Parser -- #
#--------------------------------------------------------------------#

def buildParser() -> argparse.ArgumentParser:
    '''Build the CLI argument parser.'''
    parser = argparse.ArgumentParser(
        description='jonswapWaveMaker -- JONSWAP spectrum to wavemaker paddle strokes',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        '--config', type=str, default=None,
        help='Path to JSON configuration file',
    )
    parser.add_argument(
        '--preset', type=str, default='reference',
        choices=sorted(PRESETS),
        help='Configuration preset (default: reference)',
    )
    parser.add_argument(
        '--bins', type=int, default=None,
        help='Number of frequency bins',
    )
    parser.add_argument(
        '--strategy', type=str, default=None, choices=['random', 'uniform'],
        help='Bin boundary strategy',
    )
    parser.add_argument(
        '--seed', type=int, default=None,
        help='Seed for the random boundary strategy',
    )
    parser.add_argument(
        '--kinematics', type=str, default=None, choices=['piston', 'flap'],
        help='Paddle kinematics',
    )
    parser.add_argument(
        '--policy', type=str, default=None, choices=['transferFunction', 'totalEnergy'],
        help='Energy to stroke conversion policy',
    )
    parser.add_argument(
        '--max-stroke', type=float, default=None,
        help='Stroke to normalize to [m]',
    )
    parser.add_argument(
        '--table', action='store_true',
        help='Write the sampled spectrum table (w, amp)',
    )
    parser.add_argument(
        '--plot', action='store_true',
        help='Write an HTML report figure',
    )
    parser.add_argument(
        '--output-dir', type=str, default='output',
        help='Output directory for the table and plot (default: output)',
    )
    parser.add_argument(
        '-v', '--verbose', action='count', default=0,
        help='Log pipeline progress (-v info, -vv debug)',
    )

    return parser


def applyOverrides(config: WaveMakerConfig, args: argparse.Namespace) -> WaveMakerConfig:
    '''Return a copy of config with the CLI options that were given applied.'''
    overrides = {
        'numberOfBins': args.bins,
        'strategy': args.strategy,
        'seed': args.seed,
        'kinematics': args.kinematics,
        'paddlePolicy': args.policy,
        'maxStroke': args.max_stroke,
    }
    return replace(config, **{k: v for k, v in overrides.items() if v is not None})


#--------------------------------------------------------------------#
# -- Runner Class -- #
#--------------------------------------------------------------------#

class WaveMakerRunner:
    '''
    Runs the spectrum-to-stroke pipeline for one configuration.
    '''

    def run(
        self,
        config: WaveMakerConfig,
        writeTable: bool = False,
        writePlot: bool = False,
        outputDir: str = 'output',
    ) -> dict:
        '''
        Run the full pipeline and print the report.

        Parameters:
        -----------
        config : WaveMakerConfig
            Run configuration
        writeTable : bool
            Write the spectrum table to outputDir
        writePlot : bool
            Write the HTML report figure to outputDir
        outputDir : str
            Output directory

        Returns:
        --------
        dict : Pipeline summary plus any output paths
        '''
        waveMaker = SpectralWaveMaker(config.buildParameters())

        waveMaker.generateBins(config.numberOfBins, config.buildStrategy())
        energies = waveMaker.integrateBins(config.dx, config.integrationPolicy)
        amplitudes = waveMaker.computePaddleAmplitudes(
            config.waterDepth,
            kinematics=config.kinematics,
            maxStroke=config.maxStroke,
            policy=config.paddlePolicy,
            normalization=config.normalization,
            dispersion=config.dispersion,
        )

        self._printReport(waveMaker, config)

        results = waveMaker.summary()

        if writeTable:
            tablePath = writeSpectrumTable(
                os.path.join(outputDir, 'jonswap_spec.txt'),
                waveMaker.spectrum,
                config.tableStart,
                config.tableStop,
                config.tableStep,
            )
            print(f'  Spectrum table:    {tablePath}')
            results['tablePath'] = tablePath

        if writePlot:
            # Imported here so plotly is only loaded when a plot is requested
            from jonswapWaveMaker.visualization.spectrumPlots import createReportFigure

            os.makedirs(outputDir, exist_ok=True)
            plotPath = os.path.join(outputDir, 'jonswap_report.html')
            fig = createReportFigure(waveMaker.spectrum, waveMaker.binSet, energies, amplitudes)
            fig.write_html(plotPath)
            print(f'  Report figure:     {plotPath}')
            results['plotPath'] = plotPath

        if writeTable or writePlot:
            print()

        return results

    def _printReport(self, waveMaker: SpectralWaveMaker, config: WaveMakerConfig) -> None:
        p = waveMaker.parameters
        binSet = waveMaker.binSet
        energies = waveMaker.energies
        amplitudes = waveMaker.amplitudes

        print()
        print('=' * 62)
        print('  JONSWAP SPECTRAL WAVE MAKER')
        print('=' * 62)
        print()

        #--------------------------------------------------------------------#
        # Spectrum Parameters
        #--------------------------------------------------------------------#
        print('-' * 62)
        print('  SPECTRUM PARAMETERS')
        print('-' * 62)
        print(f'  alpha:             {p.alpha:10.6f}')
        print(f'  gamma:             {p.peakSharpening:10.3f}')
        print(f'  w_p:               {p.peakFrequency:10.4f} rad/s')
        print(f'  w_max:             {p.maxFrequency:10.4f} rad/s')
        print(f'  s1 (w <= w_p):     {p.sigmaLow:10.3f}')
        print(f'  s2 (w > w_p):      {p.sigmaHigh:10.3f}')
        if p.isWindDerived:
            print(f'  U10:               {p.windSpeed10m:10.2f} m/s')
            print(f'  Fetch:             {p.fetch:10.0f} m')
        print(f'  Bins:              {binSet.numberOfBins:10d}  ({config.strategy})')
        print(f'  Water depth:       {config.waterDepth:10.3f} m  ({amplitudes.kinematics})')
        print()

        #--------------------------------------------------------------------#
        # Bin Table
        #--------------------------------------------------------------------#
        print('-' * 62)
        print('  BINS')
        print('-' * 62)
        print(f'  {"Range":>21}  {"W_c":>8}  {"Energy":>11}  {"Stroke":>10}')
        print(f'  {"(rad/s)":>21}  {"(rad/s)":>8}  {"":>11}  {"(m)":>10}')
        print('  ' + '-' * 56)

        for (low, high), wc, energy, amp in zip(
            binSet.binRanges(), binSet.centerFrequencies, energies.energies, amplitudes.amplitudes
        ):
            print(f'  {low:9.4f} - {high:9.4f}  {wc:8.4f}  {energy:11.4e}  {amp:10.5f}')

        print()

        #--------------------------------------------------------------------#
        # Summary
        #--------------------------------------------------------------------#
        print('=' * 62)
        print('  SUMMARY')
        print('=' * 62)
        print(f'  Total area:        {energies.totalArea:12.5e} m^2')
        print(f'  Integration:       {energies.policy:>12}  (dx = {config.dx:g})')
        print(f'  Paddle policy:     {amplitudes.policy:>12}')
        print(f'  Peak stroke:       {amplitudes.peak:12.5f} m')
        print(f'  Stroke sum:        {amplitudes.total:12.5f} m')
        print('=' * 62)
        print()


#--------------------------------------------------------------------#
# -- CLI Entry Point -- #
#--------------------------------------------------------------------#

def main(argv: Optional[list[str]] = None) -> int:
    '''CLI entry point.'''
    parser = buildParser()
    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')

    try:
        if args.config:
            config = WaveMakerConfig.fromJson(args.config)
        else:
            config = PRESETS[args.preset]()
        config = applyOverrides(config, args)

        WaveMakerRunner().run(
            config,
            writeTable=args.table,
            writePlot=args.plot,
            outputDir=args.output_dir,
        )
    except WaveMakerError as e:
        logger.debug('Pipeline failed', exc_info=True)
        print(f'error: {e}', file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
