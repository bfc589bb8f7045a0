"""
Analytics modules turning normalized booking rows into dashboard-ready summaries.
It groups related modules under a stable import path and keeps package boundaries explicit.
Most functionality lives in the sibling modules; this file stays lightweight.
"""
