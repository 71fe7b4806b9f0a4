"""
Application Layer for the Workout Tracker API.

This package contains:
- ports/: Abstract repository interfaces (what the domain needs)
- use_cases/: Application services coordinating the workout operations
"""
