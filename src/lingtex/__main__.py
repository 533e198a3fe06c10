import sys

from lingtex.cli import main

sys.exit(main())
