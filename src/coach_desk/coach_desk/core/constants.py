"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_COACH_ID = 1
DEFAULT_PAYMENT_METHOD = "cash"
PAYMENT_METHODS = ("cash", "upi", "bank", "card")
TRANSACTION_ID_PREFIX = "TXN"
API_KEY_VISIBLE_CHARS = 4
DEFAULT_DB_TIMEOUT_SECONDS = 5.0
