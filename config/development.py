import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

ACADEMY_NAME = os.getenv("ACADEMY_NAME", "R3 Academy")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Load the built-in student list on startup.
SEED_STUDENTS = bool(int(os.getenv("SEED_STUDENTS", "1")))
UPCOMING_WINDOW_DAYS = int(os.getenv("UPCOMING_WINDOW_DAYS", "7"))

# Exports are headerless unless a consumer asks for column names.
CSV_INCLUDE_HEADER = bool(int(os.getenv("CSV_INCLUDE_HEADER", "0")))
