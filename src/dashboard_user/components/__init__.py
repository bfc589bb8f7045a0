# This package groups reusable Streamlit components used by multiple dashboard pages.
# It exists to keep chart, card, and table patterns consistent across tabs.

__all__ = ["summary_cards", "tables", "charts"]
