"""Parsers for EAD finding-aid documents."""
