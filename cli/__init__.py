"""
Command-line interface for the React App e2e harness.
"""
