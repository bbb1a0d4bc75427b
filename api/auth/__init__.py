"""
User registration, login and bearer-token checks.
"""
