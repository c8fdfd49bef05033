"""
Core filtering and command building for Stagefmt.
"""
