"""
Post CRUD with owner-gated updates and deletes.
"""
