import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

ACADEMY_NAME = os.getenv("ACADEMY_NAME", "R3 Academy")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SEED_STUDENTS = bool(int(os.getenv("SEED_STUDENTS", "1")))
UPCOMING_WINDOW_DAYS = int(os.getenv("UPCOMING_WINDOW_DAYS", "7"))

CSV_INCLUDE_HEADER = bool(int(os.getenv("CSV_INCLUDE_HEADER", "0")))
