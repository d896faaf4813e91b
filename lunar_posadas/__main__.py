import sys

from lunar_posadas.game import main

sys.exit(main())
