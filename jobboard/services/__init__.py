"""Domain services: account, user, vacancy and application operations on a DB session."""
