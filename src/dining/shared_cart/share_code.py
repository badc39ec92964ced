"""Share code generation.

Codes are 12 hex characters drawn from ``secrets``. The store enforces
uniqueness; allocation checks for a clash first and regenerates a bounded
number of times.
"""

import secrets

import structlog

from dining.exceptions import ShareCodeConflictError

logger = structlog.get_logger(__name__)

SHARE_CODE_BYTES = 6
MAX_ATTEMPTS = 5


def generate_share_code() -> str:
    return secrets.token_hex(SHARE_CODE_BYTES)


def allocate_share_code(is_taken, generate=generate_share_code, attempts=MAX_ATTEMPTS) -> str:
    """Return a freshly generated code for which ``is_taken(code)`` is false.

    Raises ``ShareCodeConflictError`` after ``attempts`` clashes.
    """
    for attempt in range(1, attempts + 1):
        code = generate()
        if not is_taken(code):
            return code
        logger.warning("Share code collision, regenerating", attempt=attempt)

    raise ShareCodeConflictError({"share_code": [f"No free share code after {attempts} attempts"]})
