"""Exportación JSON de los resultados de búsqueda."""

from __future__ import annotations

import json

from core.domain.models import SearchReport


def search_report_to_json(report: SearchReport) -> str:
    """Serializa `SearchReport` a JSON UTF-8 con formato estable."""

    payload = report.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)
