"""Employee Attendance Tracker package.

Organized by feature modules (users, sessions, attendance, health) with a thin
Flask controller layer over service/repository layers.
"""
