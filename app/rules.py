"""
Fixed parsing and extraction rules.

These describe the layout of the exported actor sheets. They are not
user-tunable; runtime settings live in config.py.
"""

import re

QUOTE = '"'
FIELD_DELIMITER = ","
ROW_TERMINATOR = "\n"

HEADER_ROWS = 1
MIN_FIELD_COUNT = 9

CURRENCY_LABEL = "NOK"

# Captured groups only ever hold ASCII digits, '.' and '-', so float()/int() can't fail.
# A percentage may be written "4.%" or ".5%".
REVENUE_PATTERN = re.compile(rf"{CURRENCY_LABEL}\s+([0-9]+)")  # \s still matches a non-breaking space
GROWTH_PATTERN = re.compile(r"(-?(?:\d+(?:\.\d*)?|\.\d+))%", re.ASCII)
EMPLOYEES_PATTERN = re.compile(r"^(\d+)", re.ASCII)
MARKET_SHARE_PATTERN = re.compile(r"((?:\d+(?:\.\d*)?|\.\d+))%", re.ASCII)

DEFAULT_COLUMNS = {
    "name": 1,
    "revenue": 5,
    "year_over_year_growth": 6,
    "employee_count": 7,
    "market_share": 8,
}
