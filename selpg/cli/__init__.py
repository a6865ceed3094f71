"""
Command-line interface for selpg.
"""
