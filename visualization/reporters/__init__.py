from visualization.reporters.markdown_reporter import MarkdownReporter
from visualization.reporters.result_formatter import ChartSeries
from visualization.reporters.result_formatter import ResultExporter
from visualization.reporters.result_formatter import ResultFormatter

__all__ = [
    "MarkdownReporter",
    "ChartSeries",
    "ResultExporter",
    "ResultFormatter",
]
