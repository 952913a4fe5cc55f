from __future__ import annotations

import sys

from mlcookie.main import main

sys.exit(main())
