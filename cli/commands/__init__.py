"""
CLI command groups and commands.
"""
