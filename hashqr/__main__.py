import sys

from hashqr.cli import main

sys.exit(main())
