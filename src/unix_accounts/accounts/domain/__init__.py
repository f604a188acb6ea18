"""Domain layer for the accounts context."""
