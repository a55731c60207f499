import sys

from safe_serial.cli import main

sys.exit(main())
