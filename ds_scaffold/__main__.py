import sys

from ds_scaffold.cli import main

sys.exit(main())
