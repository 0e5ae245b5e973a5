import sys

from semcommit.cli.main import main

sys.exit(main())
