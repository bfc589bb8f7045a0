"""
Root package of the hospitality pricing dashboard.
Subpackages: `common` (settings, logging, booking schema), `ingestion` (uploads), `analytics`,
`pricing_engine`, `demo` (seeded demo business), `api` (demo backend), and `dashboard_user` (Streamlit UI).
"""
