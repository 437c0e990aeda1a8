"""
swc_seed — populate the SWC database with sample records.

Architecture:
  data.py      — the sample records, built from the shared Pydantic models
  loaders/     — grouped concurrent ORM inserts, table deletes, row counts
  seeder.py    — clears tables, then inserts groups in dependency order
  cli.py       — `swc-seed run` / `swc-seed status`

Quick start:
    from swc_seed.seeder import run
    import asyncio
    result = asyncio.run(run())
"""

__version__ = "0.1.0"
