"""
The package-wide logger. Records do not propagate to the root logger, so applications control the
output by adjusting the level or handlers of `ledgerdecimal.logging.logger` directly.
"""

import logging

logger = logging.getLogger("ledgerdecimal")
logger.propagate = False
logger.setLevel(logging.INFO)
logger.addHandler(logging.StreamHandler())
