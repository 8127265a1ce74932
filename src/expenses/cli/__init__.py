"""
Command Line Interface Package

Command structure:
- expenses: Main entry point with utility commands (version, config)
- expenses money: Conversion, splitting and formatting of amounts
- expenses breakdown: Category and monthly breakdown of an expense export
"""
