"""
models/ - Domain Models
========================
Plain dataclasses mirroring database rows. No database access here.
"""
