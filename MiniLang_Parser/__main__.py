import sys

from .Main import main

sys.exit(main())
