SECRET_KEY = "test-secret"

ACADEMY_NAME = "R3 Academy"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SEED_STUDENTS = True
UPCOMING_WINDOW_DAYS = 7

CSV_INCLUDE_HEADER = False
