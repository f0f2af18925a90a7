from dataclasses import dataclass
from pathlib import Path
import json

from data.sampling.interval_estimator import Trial
from evaluation.metrics.coverage import CoverageResult
from evaluation.protocols.simulation_protocol import SimulationResult


TRIAL_HEADERS = ["id", "x", "lower", "upper", "mean", "contains_mean"]


@dataclass
class ChartSeries:
    intervals: list[dict]
    means: list[dict]
    reference_mean: float
    
    def to_dict(self) -> dict:
        return {
            "intervals": self.intervals,
            "means": self.means,
            "reference_mean": self.reference_mean,
        }


class ResultFormatter:

    @staticmethod
    def format_interval(mean: float, margin: float) -> str:
        return f"{mean:.2f}±{margin:.2f}"

    @staticmethod
    def format_percentage(value: float) -> str:
        return f"{value:.1f}%"

    @classmethod
    def format_coverage(cls, coverage: CoverageResult) -> str:
        return (
            f"{cls.format_percentage(coverage.percentage)} "
            f"({coverage.count} / {coverage.total})"
        )

    @staticmethod
    def format_gap(coverage: CoverageResult, confidence_level: float) -> str:
        gap = coverage.nominal_gap(confidence_level) * 100.0
        sign = "+" if gap >= 0 else ""
        return f"{sign}{gap:.1f}pp"

    @staticmethod
    def trial_row(trial: Trial, population_mean: float) -> list:
        return [
            trial.id,
            trial.x,
            f"{trial.lower:.6f}",
            f"{trial.upper:.6f}",
            f"{trial.mean:.6f}",
            trial.contains(population_mean),
        ]

    @classmethod
    def trial_rows(cls, result: SimulationResult) -> list[list]:
        return [
            cls.trial_row(trial, result.population_mean)
            for trial in result.trials
        ]

    @staticmethod
    def build_chart_series(result: SimulationResult) -> ChartSeries:
        """Interval segments and mean markers keyed by trial id, plus the true-mean line."""
        intervals = [
            {
                "id": trial.id,
                "x": trial.id,
                "y1": trial.lower,
                "y2": trial.upper,
            }
            for trial in result.trials
        ]
        means = [
            {"id": trial.id, "x": trial.id, "mean": trial.mean}
            for trial in result.trials
        ]
        return ChartSeries(
            intervals=intervals,
            means=means,
            reference_mean=result.population_mean,
        )


class ResultExporter:

    def __init__(self, output_dir: Path):
        self._output_dir = output_dir
        self._output_dir.mkdir(parents=True, exist_ok=True)

    def export_to_json(self, data: dict, filename: str) -> Path:
        filepath = self._output_dir / filename

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

        return filepath

    def export_to_csv(
        self,
        headers: list[str],
        rows: list[list],
        filename: str,
    ) -> Path:
        filepath = self._output_dir / filename

        with open(filepath, "w", encoding="utf-8") as f:
            f.write(",".join(headers) + "\n")

            for row in rows:
                f.write(",".join(str(v) for v in row) + "\n")

        return filepath

    def export_trials(self, result: SimulationResult, filename: str) -> Path:
        return self.export_to_csv(
            TRIAL_HEADERS,
            ResultFormatter.trial_rows(result),
            filename,
        )

    def export_summary(
        self,
        experiment_name: str,
        config: dict,
        results: dict,
        filename: str,
    ) -> Path:
        summary = {
            "experiment_name": experiment_name,
            "configuration": config,
            "results": results,
        }

        return self.export_to_json(summary, filename)
