"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Mean Earth radius used by the Haversine formula.
EARTH_RADIUS_METERS = 6_371_000.0

# ABSA Bishops Gate, Upperhill Nairobi.
DEFAULT_REFERENCE_LAT = -1.2910592
DEFAULT_REFERENCE_LON = 36.8050176
DEFAULT_RADIUS_METERS = 1000.0

DEFAULT_DATA_FILE = "checkins.json"
DEFAULT_REPORT_SEND_AT = "18:00"

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"

# Durable/JSON field order of a check-in record.
RECORD_FIELDS = ("name", "deviceId", "latitude", "longitude", "date", "time", "ip")
