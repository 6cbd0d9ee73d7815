"""
mailheader API Package
"""
