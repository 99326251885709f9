"""Core building blocks shared by every layer (results, errors, config)."""
