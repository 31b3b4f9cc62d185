"""
Result export.

Responsibilities:
- Serialise analysis results (stats, host rankings, filtered listings) as
  pretty-printed JSON.
- Overwrite the destination file and report failures as WriteError.
"""
