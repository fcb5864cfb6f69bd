"""
Test Suite for mailtxn

Test Structure:
- fixtures/: Synthetic alert snippets and message builders
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI and configuration tests

Test Data:
All snippets are synthetic. Real account numbers, VPAs and reference
numbers are never included in tests.
"""
