# This package contains the Streamlit dashboard for booking analytics and pricing recommendations.
# The modules separate data access, UI components, persisted preferences, and page rendering.

__all__ = ["app"]
