import sys

from weatherdex.cli import main

sys.exit(main())
