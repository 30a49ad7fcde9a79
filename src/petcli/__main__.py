import sys

from petcli.interfaces.cli import main

sys.exit(main())
