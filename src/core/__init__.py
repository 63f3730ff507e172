"""
Core domain models and invariants.

This module contains the foundational building blocks that are independent
of external systems (storage, reporting, data ingestion).
"""
