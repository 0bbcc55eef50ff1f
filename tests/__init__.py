"""
Expense Tracker Test Suite

- test_repositories.py: in-memory expense and spending limit stores
- test_summary.py: budget summary arithmetic
- test_use_cases.py: use-cases against mocked repositories
- test_expenses.py: /expenses endpoints, end to end
- test_spending_limits.py: /spending-limits endpoints
- test_validation.py: request validation and JSON error responses

Run all tests:
    pytest tests/

Run with verbose output:
    pytest tests/ -v
"""
