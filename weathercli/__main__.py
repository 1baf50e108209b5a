import sys

from weathercli.cli import main

sys.exit(main())
