import sys

from exampledata.cli import main

sys.exit(main())
