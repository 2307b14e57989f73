"""Schema kernel: registries, slots, seeding, nested resolution, validation.

Pure code: no I/O, no logging, no clock reads.
"""
