"""
Configuration for passguard.
"""
