"""Domain layer for calorie tracking.

Pure business logic: value objects, aggregates, calculation services
and the ports infrastructure implements. Nothing here does I/O or
reads the system clock.
"""
