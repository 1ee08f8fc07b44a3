from aggregation.csv_export import export_csv
from aggregation.dashboard import dashboard_stats

__all__ = ["dashboard_stats", "export_csv"]
