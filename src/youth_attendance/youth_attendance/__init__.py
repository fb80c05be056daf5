"""Youth Attendance package.

Organized by feature modules (members, attendance, checkin, imports, users, ...)
with a thin Flask controller layer over service/repository layers.
"""
