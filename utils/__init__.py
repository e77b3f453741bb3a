"""
utils package
-------------

Contains utility modules used throughout the meeting scheduler.

Includes helpers for loading configuration constants, date handling, input validation and logging.
"""
