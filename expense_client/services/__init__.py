"""
Client-side services.
"""
