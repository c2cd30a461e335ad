import os

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

HOST = "127.0.0.1"
PORT = 3000

# Tests point this at a tmp_path file through create_app(overrides)
DATA_FILE = os.getenv("DATA_FILE", "checkins.test.json")

REFERENCE_LAT = -1.2910592
REFERENCE_LON = 36.8050176
RADIUS_METERS = 1000.0

MAIL_SERVER = ""
MAIL_PORT = 587
MAIL_USE_TLS = False
MAIL_USERNAME = ""
MAIL_PASSWORD = ""
MAIL_SENDER = ""
REPORT_RECIPIENTS = ""
REPORT_ENABLED = False
# HH:MM on the UTC clock check-in dates use
REPORT_SEND_AT = "18:00"
