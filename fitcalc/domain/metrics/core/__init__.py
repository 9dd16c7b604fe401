"""Core types for body metric domain."""
