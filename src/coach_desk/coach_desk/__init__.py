"""Coach Desk package.

Organized by feature modules (coaches, students, attendance, payments, ...)
with SQLite repositories, service layer and a thin Flask JSON layer.
"""
