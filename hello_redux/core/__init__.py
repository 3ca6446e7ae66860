"""Core constants, configuration and exceptions for Hello Redux."""
