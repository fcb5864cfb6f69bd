"""
Command Line Interface Package

Command Structure:
- mailtxn: Main entry point with utility commands (version, config)
- mailtxn extract: Run the extraction pipeline over a saved message dump
- mailtxn query: Print the Gmail search query for the configured filters
- mailtxn fetch: Fetch alert emails from Gmail and extract transactions
"""
