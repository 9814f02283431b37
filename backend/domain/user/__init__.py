"""User domain module.

This domain manages user accounts, credentials and the body profile
the nutrition targets are calculated from.
"""
