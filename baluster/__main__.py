import sys

from baluster.cli import main

sys.exit(main())
