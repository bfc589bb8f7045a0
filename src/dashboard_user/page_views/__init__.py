# This package holds the top-level dashboard page renderers, one per tab.
# It exists so each page can own its own charts, tables, and explanatory copy.

__all__ = ["dashboard", "data_management", "pricing_engine", "competitors", "assistant"]
