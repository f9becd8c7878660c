"""R3 Academy admin dashboard package.

Organized by feature modules (students, schedules, birthdays, attendance,
exports, dashboard) with a thin Flask controller layer on top of plain
service/repository classes. All state is in memory for the life of the app.
"""
