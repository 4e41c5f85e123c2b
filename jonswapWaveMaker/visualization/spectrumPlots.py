# -- Spectrum and Paddle Stroke Plots -- #

'''
Plotly-based interactive plots for the discretized spectrum.
'''

from __future__ import annotations

from typing import Optional

import numpy as np
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from jonswapWaveMaker.visualization import theme
from jonswapWaveMaker.spectrum.jonswap import JonswapSpectrum
from jonswapWaveMaker.binning.boundaries import BinSet
from jonswapWaveMaker.binning.integrator import BinEnergies
from jonswapWaveMaker.paddle.transfer import PaddleAmplitudes


def _spectrumCurve(spectrum: JonswapSpectrum, nPoints: int) -> tuple[np.ndarray, np.ndarray]:
    wmax = spectrum.parameters.maxFrequency
    w = np.linspace(wmax / nPoints, wmax, nPoints)
    return w, spectrum.densityBatch(w)


def plotSpectrumBins(
    spectrum: JonswapSpectrum,
    binSet: Optional[BinSet] = None,
    nPoints: int = 500,
) -> go.Figure:
    '''
    Plot S(omega) over (0, omega_max] with the bin boundaries overlaid.

    Parameters:
    -----------
    spectrum : JonswapSpectrum
        Spectrum to plot
    binSet : BinSet, optional
        Bins whose boundaries and centres are drawn
    nPoints : int
        Number of curve samples

    Returns:
    --------
    go.Figure : Plotly figure
    '''
    p = spectrum.parameters
    w, s = _spectrumCurve(spectrum, nPoints)

    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=w, y=s, mode='lines', name='S(omega)',
        line=dict(color=theme.SPECTRUM_COLOR, width=2),
    ))

    fig.add_vline(
        x=p.peakFrequency,
        line=dict(color=theme.PEAK_COLOR, dash='dot', width=1),
        annotation_text=f'wp = {p.peakFrequency:.3f}',
    )

    if binSet is not None:
        for bound in binSet.boundaries:
            fig.add_vline(x=bound, line=dict(color=theme.BIN_EDGE_COLOR, dash='dash', width=1))

        centers = np.asarray(binSet.centerFrequencies)
        fig.add_trace(go.Scatter(
            x=centers, y=spectrum.densityBatch(centers), mode='markers', name='Bin centres',
            marker=dict(color=theme.ENERGY_COLOR, size=7),
        ))

    fig.update_layout(
        title=f'JONSWAP Spectrum (alpha={p.alpha:.4g}, gamma={p.peakSharpening:.2g}, '
              f'wmax={p.maxFrequency:.3g} rad/s)',
        xaxis_title='Angular frequency (rad/s)',
        yaxis_title='S (m^2 s/rad)',
        template=theme.TEMPLATE,
        height=400,
    )

    return fig


def plotPaddleStrokes(
    amplitudes: PaddleAmplitudes,
    binSet: BinSet,
) -> go.Figure:
    '''
    Bar chart of paddle stroke per bin, bars spanning each bin's range.

    Parameters:
    -----------
    amplitudes : PaddleAmplitudes
        Stroke per bin
    binSet : BinSet
        Bins the strokes belong to

    Returns:
    --------
    go.Figure : Plotly figure
    '''
    fig = go.Figure()

    fig.add_trace(go.Bar(
        x=list(binSet.centerFrequencies),
        y=list(amplitudes.amplitudes),
        width=list(binSet.widths),
        name='Stroke',
        marker=dict(color=theme.STROKE_COLOR, line=dict(color=theme.REFERENCE_LINE, width=1)),
    ))

    if amplitudes.maxStroke is not None:
        fig.add_hline(
            y=amplitudes.maxStroke,
            line=dict(color=theme.REFERENCE_LINE, dash='dash', width=1),
            annotation_text=f'max stroke = {amplitudes.maxStroke:.3g} m',
        )

    fig.update_layout(
        title=f'Paddle Strokes ({amplitudes.kinematics}, {amplitudes.policy})',
        xaxis_title='Angular frequency (rad/s)',
        yaxis_title='Stroke amplitude (m)',
        template=theme.TEMPLATE,
        height=400,
        bargap=0.0,
    )

    return fig


def createReportFigure(
    spectrum: JonswapSpectrum,
    binSet: BinSet,
    energies: BinEnergies,
    amplitudes: PaddleAmplitudes,
    nPoints: int = 500,
) -> go.Figure:
    '''
    Three stacked panels: spectrum with bins, energy per bin, stroke per bin.

    Returns:
    --------
    go.Figure : Plotly figure
    '''
    w, s = _spectrumCurve(spectrum, nPoints)
    centers = list(binSet.centerFrequencies)
    widths = list(binSet.widths)

    energyLabel = 'Mean density' if energies.policy == 'widthNormalized' else 'Bin energy'

    fig = make_subplots(
        rows=3, cols=1, shared_xaxes=True,
        subplot_titles=('Spectrum', energyLabel, 'Paddle stroke'),
        vertical_spacing=0.08,
    )

    fig.add_trace(
        go.Scatter(x=w, y=s, mode='lines', name='S(omega)',
                   line=dict(color=theme.SPECTRUM_COLOR, width=2)),
        row=1, col=1,
    )
    for bound in binSet.boundaries:
        fig.add_vline(x=bound, line=dict(color=theme.BIN_EDGE_COLOR, dash='dash', width=1),
                      row=1, col=1)

    fig.add_trace(
        go.Bar(x=centers, y=list(energies.energies), width=widths, name=energyLabel,
               marker=dict(color=theme.ENERGY_COLOR)),
        row=2, col=1,
    )
    fig.add_trace(
        go.Bar(x=centers, y=list(amplitudes.amplitudes), width=widths, name='Stroke',
               marker=dict(color=theme.STROKE_COLOR)),
        row=3, col=1,
    )

    fig.update_xaxes(title_text='Angular frequency (rad/s)', row=3, col=1)
    fig.update_yaxes(title_text='S (m^2 s/rad)', row=1, col=1)
    fig.update_yaxes(title_text='m^2' if energies.policy == 'raw' else 'm^2 s/rad', row=2, col=1)
    fig.update_yaxes(title_text='m', row=3, col=1)

    fig.update_layout(
        title='Spectral Wave Maker',
        template=theme.TEMPLATE,
        height=900,
        showlegend=False,
        bargap=0.0,
    )

    return fig
