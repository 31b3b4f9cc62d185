"""
Listing ingestion package.

Responsibilities:
- Read the listings CSV from disk, keeping every value as text.
- Wrap the loaded rows in an immutable RecordSet for the handler layer.
- Report unreadable or malformed sources as LoadError.
"""
