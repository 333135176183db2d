import sys

from backpack_engine.cli import main

sys.exit(main())
