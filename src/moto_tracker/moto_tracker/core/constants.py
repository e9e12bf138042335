"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

TRIP_COST_PER_WAY = 300  # Kz

CURRENCY_SUFFIX = "Kz"
APP_TITLE = "MotoTracker Angola"

DATE_KEY_FORMAT = "%Y-%m-%d"
MONTH_KEY_FORMAT = "%Y-%m"
DISPLAY_DATE_FORMAT = "%d/%m/%Y"
DISPLAY_DATETIME_FORMAT = "%d/%m/%Y %H:%M"

WEEKDAY_LABELS = ["Seg", "Ter", "Qua", "Qui", "Sex", "Sáb", "Dom"]

MONTH_NAMES_PT = [
    "janeiro",
    "fevereiro",
    "março",
    "abril",
    "maio",
    "junho",
    "julho",
    "agosto",
    "setembro",
    "outubro",
    "novembro",
    "dezembro",
]
