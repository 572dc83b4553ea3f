import sys

from pathshell.shell import main

sys.exit(main())
