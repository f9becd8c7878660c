"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ISO_DATE_FORMAT = "%Y-%m-%d"

DEFAULT_UPCOMING_WINDOW_DAYS = 7
DASHBOARD_BIRTHDAY_WINDOW_DAYS = 15
BIRTHDAY_BOARD_WINDOW_DAYS = 30

MISSING_VALUE = "N/A"
UNKNOWN_STUDENT_NAME = "Unknown"

BIODATA_FILENAME = "R3_Academy_Biodata.csv"
ATTENDANCE_TODAY_FILENAME = "Attendance_R3_{day}.csv"
ATTENDANCE_HISTORY_FILENAME = "Attendance_History_R3_{start}_to_{end}.csv"
