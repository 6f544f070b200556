"""Shared support code: notation, seeds, schemas, referee."""
