"""
Application Layer for the max-log service.

This package contains:
- ports/: Abstract repository interfaces (what the domain needs)
- use_cases/: Orchestration of validation, persistence and logging
- exceptions: Typed application errors
"""
