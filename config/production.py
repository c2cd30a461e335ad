import os

from config import env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

DATA_FILE = os.getenv("DATA_FILE", "checkins.json")

REFERENCE_LAT = float(os.getenv("REFERENCE_LAT", "-1.2910592"))
REFERENCE_LON = float(os.getenv("REFERENCE_LON", "36.8050176"))
RADIUS_METERS = float(os.getenv("RADIUS_METERS", "1000"))

MAIL_SERVER = os.getenv("MAIL_SERVER", "")
MAIL_PORT = int(os.getenv("MAIL_PORT", "587"))
MAIL_USE_TLS = env_flag("MAIL_USE_TLS", "1")
MAIL_USERNAME = os.getenv("MAIL_USERNAME", "")
MAIL_PASSWORD = os.getenv("MAIL_PASSWORD", "")
MAIL_SENDER = os.getenv("MAIL_SENDER", "")
REPORT_RECIPIENTS = os.getenv("REPORT_RECIPIENTS", "")
REPORT_ENABLED = env_flag("REPORT_ENABLED", "1")
# HH:MM on the UTC clock check-in dates use
REPORT_SEND_AT = os.getenv("REPORT_SEND_AT", "18:00")
