"""
(C) 2026 The mldsa-kat authors

Released under the Simplified BSD License (see license.txt)
"""

import sys

from .converter import main

sys.exit(main())
