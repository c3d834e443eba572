"""Platform adapters: logging and filesystem access."""
