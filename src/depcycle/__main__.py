import sys

from depcycle.cli import main

sys.exit(main())
