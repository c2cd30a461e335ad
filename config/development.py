import os

from config import env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3000"))

# Durable check-in store
DATA_FILE = os.getenv("DATA_FILE", "checkins.json")

# Geofence (ABSA Bishops Gate, Upperhill Nairobi)
REFERENCE_LAT = float(os.getenv("REFERENCE_LAT", "-1.2910592"))
REFERENCE_LON = float(os.getenv("REFERENCE_LON", "36.8050176"))
RADIUS_METERS = float(os.getenv("RADIUS_METERS", "1000"))

# Daily email report
MAIL_SERVER = os.getenv("MAIL_SERVER", "")
MAIL_PORT = int(os.getenv("MAIL_PORT", "587"))
MAIL_USE_TLS = env_flag("MAIL_USE_TLS", "1")
MAIL_USERNAME = os.getenv("MAIL_USERNAME", "")
MAIL_PASSWORD = os.getenv("MAIL_PASSWORD", "")
MAIL_SENDER = os.getenv("MAIL_SENDER", "")
REPORT_RECIPIENTS = os.getenv("REPORT_RECIPIENTS", "")
REPORT_ENABLED = env_flag("REPORT_ENABLED", "0")
# HH:MM on the UTC clock check-in dates use
REPORT_SEND_AT = os.getenv("REPORT_SEND_AT", "18:00")
