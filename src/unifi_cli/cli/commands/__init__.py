"""Command implementations registered on the root group."""
