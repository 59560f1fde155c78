"""Configuration, logging, errors and application wiring."""
