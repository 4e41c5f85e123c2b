# -- Physical Constants for JONSWAP Wave Generation -- #

'''
Physical, spectral, and numerical constants for spectral wave-maker design.
All values in SI units unless otherwise noted.

References:
-----------
Hasselmann et al. (1973) -- Measurements of wind-wave growth and swell decay (JONSWAP)
Biesel (1951) -- Wave maker theory
'''

######################################################################
# -- Fluid Properties -- #
######################################################################

# Gravitational acceleration [m/s^2]
gravity: float = 9.81

######################################################################
# -- JONSWAP Shape Defaults -- #
######################################################################

# Peak sharpening factor gamma (mean JONSWAP value)
defaultPeakSharpening: float = 3.3

# Spectral width for omega <= omega_p
defaultSigmaLow: float = 0.07

# Spectral width for omega > omega_p
defaultSigmaHigh: float = 0.09

# Pierson-Moskowitz shape exponent coefficient in exp(-1.2 * (wp/w)^4)
shapeCoefficient: float = 1.2

######################################################################
# -- Wind/Fetch Derivation Coefficients -- #
######################################################################

# alpha = alphaScale * (U^2 / (F*g))^alphaExponent
alphaScale: float = 0.076
alphaExponent: float = 0.22

# omega_p = peakScale * (g^2 / (U*F))^(1/3)
peakScale: float = 22.0

# omega_max = maxFrequencyFactor * omega_p / (2*pi)
maxFrequencyFactor: float = 33.0

######################################################################
# -- Numerical Guards -- #
######################################################################

# Smallest kh accepted by the paddle transfer functions
minimumWaveNumberDepth: float = 1.0e-4

# Above this value of 2kh the deep-water limits are used (sinh/cosh overflow)
deepWaterLimit: float = 50.0

# Upper bound on normal draws for the random boundary strategy
defaultMaxDraws: int = 1_000_000

# Jitter applied to the uniform boundary grid, as a fraction of bin width
defaultJitterFraction: float = 0.025
