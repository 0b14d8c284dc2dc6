"""Application-level constants."""

# Source label used in logs for specs given on the command line
ARGV_SOURCE = "argv"

# Text report line prefixes
ADD_PREFIX = "+ "
REMOVE_PREFIX = "- "
ERROR_PREFIX = "error: "
