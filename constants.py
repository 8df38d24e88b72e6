"""
Global constants used throughout the project
"""

from typing import Final

import numpy as np

# Labels
LABEL_DTYPE: Final = np.int64

# Reserved "unassigned" marker, smallest representable label value
NOLABEL: Final[int] = int(np.iinfo(LABEL_DTYPE).min)

# First label handed out by a scan, immediately above the sentinel
LABEL_START: Final[int] = NOLABEL + 1

# Connectivity
DEFAULT_CONNECTIVITY: Final = 4
