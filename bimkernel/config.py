"""Global configuration: probe limits, sentinels, default colours."""

import string

# Identifier allocation
EMPTY_CANDIDATE = "1"
MAX_NUMERIC_PROBES = 1000
LETTER_SUFFIXES = string.ascii_uppercase
RANDOM_TOKEN_LENGTH = 4

# Window searched above the highest taken number for a free plain number
NEXT_NUMBER_WINDOW = 10000

# Grouping key used by colour splash when the parameter has no value
UNGROUPED_KEY = "None"

# Default gradient endpoints: blue -> red
GRADIENT_START = (0, 0, 180)
GRADIENT_END = (180, 0, 0)

DEFAULT_COLOR = "#CCCCCC"
