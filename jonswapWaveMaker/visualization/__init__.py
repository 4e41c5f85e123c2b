# -- Visualization Subpackage -- #

'''
Plotly figures for the spectrum, its bins, and the paddle strokes.
'''

from jonswapWaveMaker.visualization.spectrumPlots import (
    createReportFigure,
    plotPaddleStrokes,
    plotSpectrumBins,
)
