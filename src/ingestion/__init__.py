"""
Package marker for booking upload ingestion modules in `src.ingestion`.
It groups related modules under a stable import path and keeps package boundaries explicit.
Most functionality lives in the sibling modules; this file stays lightweight.
"""
