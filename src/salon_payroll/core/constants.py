"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

OVERTIME_MULTIPLIER = 1.5
CURRENCY_SUFFIX = "ج.م"
DEFAULT_API_TIMEOUT_SECONDS = 30

# Notifications
DEFAULT_NOTIFICATION_INTERVAL_SECONDS = 5 * 60
APPOINTMENT_REMINDER_LEAD_MINUTES = 15
OPEN_SHIFT_ALERT_HOURS = 12
