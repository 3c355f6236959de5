import sys

from progressview.cli import main

sys.exit(main())
