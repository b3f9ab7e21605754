import sys

from gitai.cli import main

sys.exit(main())
