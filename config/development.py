import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

APP_NAME = "Hi Salon"
APP_VERSION = "3.0.0"

# Backend disabled by default: payroll is computed locally from mock data
USE_BACKEND = bool(int(os.getenv("USE_BACKEND", "0")))
BACKEND_URL = os.getenv("BACKEND_URL", "")
API_TOKEN = os.getenv("API_TOKEN") or None
API_TIMEOUT_SECONDS = float(os.getenv("API_TIMEOUT_SECONDS", "30"))
# Fall back to local calculation when the backend fails for an employee
AUTO_FALLBACK_TO_MOCK = bool(int(os.getenv("AUTO_FALLBACK_TO_MOCK", "1")))

MOCK_DATA_PATH = os.getenv("MOCK_DATA_PATH") or None

# Scheduled start of the working day, used to derive late minutes
WORK_START_TIME = os.getenv("WORK_START_TIME", "09:00")

NOTIFICATIONS_ENABLED = bool(int(os.getenv("NOTIFICATIONS_ENABLED", "1")))
NOTIFICATION_INTERVAL_SECONDS = int(os.getenv("NOTIFICATION_INTERVAL_SECONDS", "300"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
