# This file stores copy blocks for headings, section descriptions, and empty-state messages in English and French.
# It exists so narrative wording stays consistent across the dashboard pages.
# Centralizing text also makes future wording reviews and translations easier without touching rendering logic.
# Unknown keys fall back to English, then to the key itself.

from __future__ import annotations

APP_TITLE = "Hospitality Pricing Dashboard"

UI_TEXT: dict[str, dict[str, str]] = {
    "en": {
        "app_subtitle": "Turn booking history into daily price recommendations with plain-language context.",
        "tab_dashboard": "Dashboard",
        "tab_data": "Data",
        "tab_pricing_engine": "Pricing Engine",
        "tab_competitors": "Competitors",
        "tab_assistant": "Assistant",
        "sidebar_language": "Language",
        "sidebar_active_file": "Active dataset",
        "sidebar_navigation": "Pages",
        "sidebar_sources": "Data sources",
        "demo_mode_banner": "Demo mode: showing seeded sample data for a fictional campsite.",
        "empty_dashboard": "No booking data yet. Upload a file on the Data page to populate the dashboard.",
        "rejected_rows": "{count} rows were skipped because their date could not be read.",
        "dashboard_kpis": "Key metrics",
        "chart_revenue_by_month": "Revenue by month",
        "chart_weekday_occupancy": "Average occupancy by weekday",
        "chart_price_trend": "Price trend (last 30 dates)",
        "chart_calendar": "Pricing calendar",
        "data_upload_header": "Upload booking data",
        "data_upload_help": "CSV, XLSX or XLS with a date column plus price and occupancy.",
        "data_upload_button": "Upload",
        "data_upload_success": "{name} uploaded ({rows} rows).",
        "data_upload_failed": "Upload failed: {error}",
        "data_files_header": "Uploaded files",
        "data_no_files": "No files uploaded yet.",
        "data_enrich_button": "Enrich",
        "data_delete_button": "Delete",
        "data_enrich_running": "Enriching {name}...",
        "data_enrich_done": "Enrichment complete for {name}.",
        "data_enrich_failed": "Enrichment did not complete for {name}.",
        "data_preview_header": "Preview",
        "pricing_header": "Pricing recommendations",
        "pricing_strategy": "Strategy",
        "pricing_days": "Forecast days",
        "pricing_no_file": "Select a dataset to generate recommendations.",
        "pricing_empty": "No recommendations are available for this window.",
        "pricing_table_header": "Daily recommendations",
        "pricing_download": "Download CSV",
        "pricing_timeline": "Current vs recommended price",
        "competitors_header": "Competitor monitoring",
        "competitors_prices": "Current competitor prices",
        "competitors_band": "Market price band",
        "competitors_empty": "No competitor prices are available right now.",
        "competitors_suggestion": "Suggested price",
        "assistant_header": "Pricing assistant",
        "assistant_placeholder": "Ask about pricing, occupancy, competitors, or weather",
        "assistant_quick_suggestion": "Quick suggestion",
        "assistant_clear": "Clear conversation",
        "source_label": "Source: {source}",
    },
    "fr": {
        "app_subtitle": "Transformez l'historique de réservations en recommandations de prix quotidiennes.",
        "tab_dashboard": "Tableau de bord",
        "tab_data": "Données",
        "tab_pricing_engine": "Moteur de prix",
        "tab_competitors": "Concurrents",
        "tab_assistant": "Assistant",
        "sidebar_language": "Langue",
        "sidebar_active_file": "Jeu de données actif",
        "sidebar_navigation": "Pages",
        "sidebar_sources": "Sources de données",
        "demo_mode_banner": "Mode démo : données d'exemple pour un camping fictif.",
        "empty_dashboard": "Aucune réservation. Importez un fichier depuis la page Données.",
        "rejected_rows": "{count} lignes ignorées car leur date est illisible.",
        "dashboard_kpis": "Indicateurs clés",
        "chart_revenue_by_month": "Revenu par mois",
        "chart_weekday_occupancy": "Occupation moyenne par jour",
        "chart_price_trend": "Évolution du prix (30 dernières dates)",
        "chart_calendar": "Calendrier des prix",
        "data_upload_header": "Importer des réservations",
        "data_upload_help": "CSV, XLSX ou XLS avec une colonne date, un prix et une occupation.",
        "data_upload_button": "Importer",
        "data_upload_success": "{name} importé ({rows} lignes).",
        "data_upload_failed": "Échec de l'import : {error}",
        "data_files_header": "Fichiers importés",
        "data_no_files": "Aucun fichier importé.",
        "data_enrich_button": "Enrichir",
        "data_delete_button": "Supprimer",
        "data_enrich_running": "Enrichissement de {name}...",
        "data_enrich_done": "Enrichissement terminé pour {name}.",
        "data_enrich_failed": "L'enrichissement de {name} n'a pas abouti.",
        "data_preview_header": "Aperçu",
        "pricing_header": "Recommandations de prix",
        "pricing_strategy": "Stratégie",
        "pricing_days": "Jours de prévision",
        "pricing_no_file": "Sélectionnez un jeu de données pour générer des recommandations.",
        "pricing_empty": "Aucune recommandation disponible pour cette période.",
        "pricing_table_header": "Recommandations quotidiennes",
        "pricing_download": "Télécharger le CSV",
        "pricing_timeline": "Prix actuel et recommandé",
        "competitors_header": "Veille concurrentielle",
        "competitors_prices": "Prix actuels des concurrents",
        "competitors_band": "Fourchette de prix du marché",
        "competitors_empty": "Aucun prix concurrent disponible.",
        "competitors_suggestion": "Prix suggéré",
        "assistant_header": "Assistant tarifaire",
        "assistant_placeholder": "Posez une question sur les prix, l'occupation, la concurrence ou la météo",
        "assistant_quick_suggestion": "Suggestion rapide",
        "assistant_clear": "Effacer la conversation",
        "source_label": "Source : {source}",
    },
}


def t(key: str, language: str = "en", **values: object) -> str:
    table = UI_TEXT.get(language, UI_TEXT["en"])
    text = table.get(key) or UI_TEXT["en"].get(key) or key
    return text.format(**values) if values else text
