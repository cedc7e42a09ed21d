import sys

from gdrivefetch.cli import main

sys.exit(main())
