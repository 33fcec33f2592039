"""
ChainCalc Configuration Settings
"""
import os

# Application Settings
APP_NAME = "ChainCalc"
VERSION = "1.0.0"

# Display Settings
DECIMAL_SEPARATOR = ","
ERROR_TEXT = "Error"
MAX_FRACTION_DIGITS = 8

# Database Settings
DB_PATH = os.path.join(os.path.dirname(__file__), "chaincalc.db")

# History Settings
MAX_HISTORY_ITEMS = 100

# Graph settings
GRAPH_FIGSIZE = (5.5, 3.5)
GRAPH_DPI = 90

# Background computation
PI_DEFAULT_TERMS = 1_000_000
PI_MAX_TERMS = 10_000_000
PI_TASK_TIMEOUT = 30

# Web Portal settings
WEB_HOST = '0.0.0.0'
WEB_PORT = 8888
