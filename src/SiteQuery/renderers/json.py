"""JSON output for built queries.

Results are accumulated per command and written as one file on finalize:
`<base_dir>/json/<action>_<YYYYmmdd_HHMMSS>.json`.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from SiteQuery.core.query import QueryRequest, QueryResult
from SiteQuery.renderers.base import OutputWriter
from SiteQuery.utils.log import log


def render_json(result: QueryResult) -> dict[str, Any]:
    """Render a result into a JSON-serializable dict."""
    return {
        "request": _request_payload(result.request),
        "query": result.query,
        "url": result.url,
    }


def _request_payload(request: QueryRequest) -> dict[str, Any]:
    return {
        "site": request.site,
        "types": list(request.types),
        "keywords": list(request.keywords),
        "keyword_join": request.keyword_join.value,
        "locations": list(request.locations),
        "excludes": list(request.excludes),
    }


class JsonFileWriter(OutputWriter):
    """Accumulate results and write to JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict[str, Any]] = []

    def write_result(self, result: QueryResult) -> None:
        self.all_results.append(render_json(result))

    def finalize(self, action: str) -> None:
        """Write accumulated results to a JSON file.

        Nothing is written when no result was accumulated.

        Args:
            action: The CLI command name (used in filename).
        """
        if not self.all_results:
            log.debug("No results to write as JSON")
            return
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=2)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(payload, encoding="utf-8")
        log.info("JSON saved to %s", output_path)
