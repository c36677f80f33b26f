"""Restrictions config loading and validation."""
