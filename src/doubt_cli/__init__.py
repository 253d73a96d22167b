"""
CLI (Command Line Interface) for the doubt diff tool.

This is a thin wrapper around the core package. All argument handling logic
lives in doubt so a diff engine or another front end can reuse it.
"""
