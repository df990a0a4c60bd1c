import sys

from slpsort.cli import main

sys.exit(main())
