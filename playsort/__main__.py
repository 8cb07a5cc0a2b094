import sys

from playsort.infrastructure.cli.app import main

sys.exit(main())
