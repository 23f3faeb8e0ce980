"""
Core password utilities.
"""
