SECRET_KEY = "test-secret"

APP_NAME = "Hi Salon"
APP_VERSION = "test"

USE_BACKEND = False
BACKEND_URL = ""
API_TOKEN = None
API_TIMEOUT_SECONDS = 1
AUTO_FALLBACK_TO_MOCK = True

MOCK_DATA_PATH = None

WORK_START_TIME = "09:00"

NOTIFICATIONS_ENABLED = False
NOTIFICATION_INTERVAL_SECONDS = 300

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
