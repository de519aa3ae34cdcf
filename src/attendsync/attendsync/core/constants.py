"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

PERCENT_DECIMALS = 1
DEFAULT_AT_RISK_THRESHOLD = 75.0
DEFAULT_TOP_CLASSES = 5
CLASS_PLACEHOLDER_PREFIX = "Class "
CLASS_PLACEHOLDER_ID_CHARS = 6
NO_SUBJECT_LABEL = "N/A"
