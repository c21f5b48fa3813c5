import sys

from bignumber.cli import main

sys.exit(main())
