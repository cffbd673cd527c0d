"""Product module constants: product code shape and allocation defaults."""

import re

PRODUCT_CODE_PREFIX = "#LT"
PRODUCT_CODE_DIGITS = 3
PRODUCT_CODE_PATTERN = r"^#LT\d{3}$"
PRODUCT_CODE_REGEX = re.compile(PRODUCT_CODE_PATTERN)

# Largest number representable in PRODUCT_CODE_DIGITS digits
MAX_CODE_SPACE_SIZE = 10**PRODUCT_CODE_DIGITS - 1

DEFAULT_SPACE_SIZE = MAX_CODE_SPACE_SIZE
DEFAULT_MAX_ATTEMPTS = 10
DEFAULT_COMMIT_ATTEMPTS = 3

# Bounds for paginated listing
DEFAULT_PAGE_LIMIT = 50
MAX_PAGE_LIMIT = 200
