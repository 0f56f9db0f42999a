import sys

from devfolio.cli import main

sys.exit(main())
