# ceramics_trade/constants.py

# Currency wording used on printed documents ("... Taka Only")
CURRENCY_NAME = "Taka"
CURRENCY_SYMBOL = "৳"

# Area conversion
SQ_INCHES_PER_SFT = 144
SQ_CM_PER_SFT = "929.03"  # kept as text so Decimal() gets the exact constant

# Rounding (decimal places)
SFT_PLACES = 2
MONEY_PLACES = 2

# Sentinel size key for a line without both dimensions
EMPTY_SIZE_KEY = "X"

# Environment overrides
ENV_REFERENCE_TABLES = "CERAMICS_TRADE_TABLES"
ENV_LOG_LEVEL = "CERAMICS_TRADE_LOG_LEVEL"

DATA_DIR = "data"
REFERENCE_TABLES_FILE = "reference_tables.json"
