import sys

from bill_manager.cli import main

sys.exit(main())
