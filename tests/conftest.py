"""Seed required settings before any app module is imported."""

import os

os.environ.setdefault("JWT_SECRET", "test-secret-key-with-at-least-32-bytes!")
os.environ.setdefault("APP_ENV", "dev")
# Lowest bcrypt cost keeps the suite fast; hashing behaviour is unchanged.
os.environ.setdefault("BCRYPT_ROUNDS", "4")
