"""Swipe Attendance package.

Turns raw access-control swipes into attendance records. Organized by feature
modules (swipes, bursts, shifts, breaks, attendance, ...) with thin service and
wiring layers on top of pure detector functions.
"""
