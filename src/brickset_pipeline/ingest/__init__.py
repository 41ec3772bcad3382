"""Record loading.

Reads the Brickset JSON document once and exposes the validated records
through a read-only store.
"""
