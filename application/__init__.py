"""
Application Layer for the exercise normalization service.

This package contains:
- ports/: Abstract interfaces for external collaborators (remote catalog matcher)
"""
