# In-memory services backing the demo API: file store, enrichment jobs, analytics, competitors, assistant.
# Routers receive them through FastAPI dependencies so tests can swap in fresh instances.
