"""Student Attendance package.

This package is organized by feature modules (students, classes, attendance,
reports, photos, ...) with a thin Flask controller layer and service/repository
layers underneath.
"""
