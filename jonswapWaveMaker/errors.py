# -- Wave-Maker Error Types -- #

'''
Exception hierarchy for the spectral wave-maker pipeline.

Each stage raises the error that describes what it detected and lets it
propagate to the caller. Nothing here is retried or clamped.
'''


class WaveMakerError(Exception):
    '''Base class for all pipeline errors.'''


class InvalidParameterError(WaveMakerError, ValueError):
    '''A parameter is outside its admissible range (non-positive, non-finite, ...).'''


class SingularEvaluationError(WaveMakerError, ArithmeticError):
    '''An evaluation hit a singularity (omega <= 0, kh ~ 0, zero total energy).'''


class NonTerminatingGenerationError(WaveMakerError, RuntimeError):
    '''Random boundary generation cannot (or did not) collect enough boundaries.'''
