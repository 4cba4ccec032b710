import sys

from payment_system.entrypoints.cli import main

sys.exit(main())
