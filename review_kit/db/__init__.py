"""
Database layer - ORM models and session management.
"""
