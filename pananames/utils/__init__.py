"""
Configuration, logging and input validation helpers
"""
