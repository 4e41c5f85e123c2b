# -- Paddle Subpackage -- #

'''
Dispersion relation and wavemaker transfer functions (piston and flap).
'''

from jonswapWaveMaker.paddle.dispersion import (
    approximateWaveNumberDepth,
    exactWaveNumberDepth,
    solveDispersionRelation,
)
from jonswapWaveMaker.paddle.transfer import (
    PaddleAmplitudes,
    PaddleTransfer,
    flapTransferRatio,
    pistonTransferRatio,
)
