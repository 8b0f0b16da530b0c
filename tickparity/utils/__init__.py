"""
PURPOSE: Shared helpers: structured logging, math, and input validation.
"""
