import sys

from chord_catalog.cli import main

sys.exit(main())
