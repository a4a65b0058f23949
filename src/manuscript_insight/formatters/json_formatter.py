"""JSON formatter for Manuscript Insight."""

import json

from ..models import AnalysisReport, report_to_dict
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the report as JSON."""

    def render(self, report: AnalysisReport) -> None:
        print(self.format(report))

    def format(self, report: AnalysisReport) -> str:
        return json.dumps(report_to_dict(report), indent=2)
