import sys

from maglo_search.cli import main


sys.exit(main())
