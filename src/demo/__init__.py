# This package holds the fictional demo business, its seeded booking history, and canned assistant replies.
# It exists so the demo API and the dashboard fallback path serve the same reproducible data.
