"""
mailheader Services Package
"""
