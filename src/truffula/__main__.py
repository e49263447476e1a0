from __future__ import annotations

import sys

from truffula.main import main

sys.exit(main())
