import sys

from deps_sweeper.cli import main

sys.exit(main())
