"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_GRAND_TOTAL_LABEL = "Grand Total"
DEFAULT_SUBTOTAL_SUFFIX = " Total"
DEFAULT_LABEL_JOINER = " - "
DEFAULT_STRING_AGG_SEPARATOR = ", "
DEFAULT_SALES_YEAR = 2023
DEFAULT_NTILE_BUCKETS = 4

# GROUPING_ID returns an int; the engine caps the argument list at 32 columns.
MAX_GROUPING_COLUMNS = 32
