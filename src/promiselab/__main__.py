import sys

from promiselab.cli import main

sys.exit(main())
