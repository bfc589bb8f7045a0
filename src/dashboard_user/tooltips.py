# This file defines narrative tooltip text for metrics, charts, and pricing tables.
# It exists so dashboard users can interpret pricing and occupancy signals without technical background.
# A single dictionary keeps explanations consistent between pages and tests.

from __future__ import annotations

TOOLTIPS: dict[str, str] = {
    "total_records_card": "Number of booking rows read from the active dataset, including rows later skipped.",
    "avg_price_card": "Average nightly price across rows with a readable price.",
    "avg_occupancy_card": "Average share of units occupied across rows with a valid occupancy.",
    "occupancy_rate_card": "Occupancy over the dataset; the change compares with the same period last year when available.",
    "adr_card": "Average daily rate: mean price charged per occupied unit-night.",
    "revpar_card": "Revenue per available unit: ADR multiplied by occupancy.",
    "expected_revenue_card": "Revenue expected for the current month, or a 30-day estimate when the month has no rows.",
    "revenue_by_month_chart": "Total price revenue per calendar month for the latest six months with data.",
    "weekday_occupancy_chart": "Average occupancy per weekday; weekdays without samples show zero.",
    "price_trend_chart": "Average price for the 30 most recent dates in the dataset.",
    "calendar_heatmap": "Each cell is one day; color shows demand derived from occupancy. Future days come from recommendations.",
    "strategy_selector": "Conservative protects occupancy, aggressive pushes price; balanced sits between them.",
    "current_revenue_card": "Revenue at current prices and current expected occupancy over the window.",
    "optimized_revenue_card": "Revenue if recommended prices are applied, at the predicted occupancy.",
    "revenue_uplift_card": "Difference between optimized and current revenue over the window.",
    "avg_price_optimized_card": "Average recommended price across the window.",
    "pricing_timeline_chart": "Current price against the recommended price for each forecast day.",
    "recommendation_table": "Revenue impact is the price change in percent; confidence combines demand and occupancy.",
    "competitor_prices_table": "Latest nightly prices observed for nearby competitors.",
    "competitor_position_card": "Where your average price sits against the competitor average (within 10% is competitive).",
    "competitor_band_chart": "Shaded band spans the 10th to 90th percentile of competitor prices; the line is the median.",
    "enrichment_progress": "Enrichment adds temporal, holiday, and weather columns to every row.",
    "quick_suggestion": "One-line suggestion based on occupancy and competitor prices.",
}
