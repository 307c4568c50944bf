import sys

from tandemsim.cli import main

sys.exit(main())
