import sys

from latcolor.cli import main

sys.exit(main())
