# core/config.py
"""
Package-wide constants.

Nothing here is read from disk; the only external input is the
GEOMPRIMS_LOG_LEVEL environment variable used as the default log level.
"""
import os
import numpy as np

# Scalar type used for every vector component.
FLOAT_DTYPE = np.float32

# Loggers configured by core.logging_config.setup_logging().
LOGGER_NAMES = ("core", "geometry")

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'
DEFAULT_LOG_LEVEL: str = os.environ.get("GEOMPRIMS_LOG_LEVEL", "WARNING").upper()

# Number of scalars a FloatBuffer reserves before its first growth.
BUFFER_INITIAL_CAPACITY = 48
