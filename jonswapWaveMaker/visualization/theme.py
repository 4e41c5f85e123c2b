# -- Visualization Theme -- #

'''
Dark-mode theme shared by the spectrum and paddle-stroke plots.
'''

# Plotly template
TEMPLATE = 'plotly_dark'

# Primary colors (Material Design, readable on dark backgrounds)
BLUE = '#42A5F5'
RED = '#EF5350'
GREEN = '#66BB6A'
ORANGE = '#FFA726'
PURPLE = '#AB47BC'

# Neutrals
REFERENCE_LINE = '#888888'

# Spectrum curve, bin edges, per-bin bars
SPECTRUM_COLOR = BLUE
BIN_EDGE_COLOR = REFERENCE_LINE
ENERGY_COLOR = ORANGE
STROKE_COLOR = GREEN
PEAK_COLOR = RED
