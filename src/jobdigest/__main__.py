"""Allow ``python -m jobdigest``."""

import sys

from jobdigest.main import main

sys.exit(main())
