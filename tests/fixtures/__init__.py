"""
Test Fixtures and Utilities

Shared test data for the extraction, Gmail and CLI tests.

All alert snippets are synthetic and do not contain real account information.
"""
