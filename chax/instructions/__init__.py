"""CHIP-8 instruction handlers, grouped by instruction family."""
