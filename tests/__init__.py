"""
Test Suite for the Expense Tracker

Test Structure:
- unit/: Unit tests mirroring src/ package structure
- integration/: Configuration and CLI workflow tests

Test Categories:
- Currency metadata, conversion and formatting
- Smallest-unit arithmetic and lossless allocation
- Category and monthly breakdowns

Test Data:
All test data uses synthetic expenses.
"""
