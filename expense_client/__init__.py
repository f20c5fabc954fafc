"""
Expense tracker client package.
"""
