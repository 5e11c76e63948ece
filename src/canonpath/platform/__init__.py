"""Platform adapters (logging)."""
