import sys

from jonswapWaveMaker.runner import main

sys.exit(main())
