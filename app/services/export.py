"""
Lead CSV export.
"""
import csv
import io
from datetime import date

from app.config import LEAD_EXPORT_COLUMNS


def export_leads_csv(leads) -> str:
    """Render leads as CSV text. Missing values become empty cells."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator='\n')
    writer.writerow([header for header, _ in LEAD_EXPORT_COLUMNS])
    for lead in leads:
        writer.writerow([
            '' if lead.get(key) is None else lead.get(key)
            for _, key in LEAD_EXPORT_COLUMNS
        ])
    return buf.getvalue()


def export_filename(today: date = None) -> str:
    today = today or date.today()
    return f"leads-{today.isoformat()}.csv"
