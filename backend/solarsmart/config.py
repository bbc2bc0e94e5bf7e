"""
SolarSmart configuration and constants.
"""

import os
from enum import Enum


class Region(str, Enum):
    MEDITERRANEAN = "Mediterranean"
    SOUTHEASTERN_ANATOLIA = "Southeastern Anatolia"
    AEGEAN = "Aegean"
    CENTRAL_ANATOLIA = "Central Anatolia"
    EASTERN_ANATOLIA = "Eastern Anatolia"
    MARMARA = "Marmara"
    BLACK_SEA = "Black Sea"


class Orientation(str, Enum):
    SOUTH = "south"
    SOUTH_EAST = "south-east"
    SOUTH_WEST = "south-west"
    EAST = "east"
    WEST = "west"
    NORTH = "north"


# Fraction of nameplate output left after inverter, cabling and thermal losses
SYSTEM_EFFICIENCY = 0.85

# Roof area needed per installed kW
ROOF_AREA_PER_KW = 6.0  # m²

# Grid emissions factor
CO2_KG_PER_KWH = 0.45

DAYS_PER_YEAR = 365
MONTHS_PER_YEAR = 12

# Business defaults used until an admin saves settings
DEFAULT_USD_RATE = 32.5          # local currency per USD
DEFAULT_ELECTRICITY_PRICE = 3.0  # local currency per kWh
DEFAULT_PANEL_WATTAGE = 450.0    # W
DEFAULT_SYSTEM_COST_PER_KW = 750.0  # USD per installed kW

CURRENCY_LABEL = "TL"

# Admin access
ADMIN_PASSWORD = os.environ.get("SOLARSMART_ADMIN_PASSWORD", "admin123")

# Optional JSON mirrors for the in-memory stores (unset = memory only)
LEADS_FILE = os.environ.get("SOLARSMART_LEADS_FILE") or None
SETTINGS_FILE = os.environ.get("SOLARSMART_SETTINGS_FILE") or None

CORS_ORIGINS = [
    "http://localhost:5173",  # Vite default
    "http://localhost:3000",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:3000",
]
