"""Alembic migration scripts for SMART WALLET."""
