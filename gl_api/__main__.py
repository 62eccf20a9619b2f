import sys

from gl_api.cli import main

sys.exit(main())
