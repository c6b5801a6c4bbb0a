"""Core: configuration, protocols, logging and wiring."""
