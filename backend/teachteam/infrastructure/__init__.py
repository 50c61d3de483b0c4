"""Infrastructure — database sessions, logging, password hashing, notifications.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)
"""
