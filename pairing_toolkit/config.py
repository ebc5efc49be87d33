"""
Toolkit Configuration
=====================

Defaults for the pairing curve and the capacity bounds of the schemes,
read from the environment once at import time.
"""

import os

# Pairing parameters
DEFAULT_PAIRING_CURVE = os.getenv('PAIRING_CURVE', 'BN254')

# Capacity bounds
DEFAULT_BATCH_CAPACITY = int(os.getenv('BATCH_CAPACITY', 16))
DEFAULT_IBBE_MAX_RECIPIENTS = int(os.getenv('IBBE_MAX_RECIPIENTS', 16))

# Development mode: allow master secrets to be serialized (tests only!)
# WARNING: must be False in production
DEV_MODE = os.getenv('DEV_MODE', 'false').lower() == 'true'


class Config:
    """Toolkit configuration."""

    def __init__(self):
        self.pairing_curve = DEFAULT_PAIRING_CURVE
        self.batch_capacity = DEFAULT_BATCH_CAPACITY
        self.ibbe_max_recipients = DEFAULT_IBBE_MAX_RECIPIENTS
        self.dev_mode = DEV_MODE

    @property
    def fallback_curves(self):
        return ['BN254', 'MNT224', 'SS512']


# Global configuration instance
config = Config()
