"""
Persistence subsystem.

Components:
- kv_store.py: SQLite-backed key/value store + first-run seeding
- preferences.py: typed access to the small persisted flags
- seed.py: the fixed initial dataset
"""
