from pathlib import Path

from evaluation.protocols.simulation_protocol import SimulationResult
from experiments.coverage_studies.study_runner import StudyResult
from visualization.reporters.result_formatter import ResultFormatter


class MarkdownReporter:

    def __init__(self, output_dir: Path):
        self._output_dir = output_dir
        self._output_dir.mkdir(parents=True, exist_ok=True)

    def generate_simulation_report(
        self,
        experiment_name: str,
        result: SimulationResult,
    ) -> str:
        lines = [
            f"# Simulation Report: {experiment_name}",
            "",
            "## Parameters",
            "",
            "| Parameter | Value |",
            "|-----------|-------|",
            f"| Sample size | {result.sample_size} |",
            f"| Confidence level | {result.confidence_level:g}% |",
            f"| Critical value | {result.critical_value:g} |",
            f"| Trials | {result.num_trials} |",
            f"| Population mean | {result.population_mean:g} |",
            "",
            "## Coverage",
            "",
            f"Intervals containing the population mean: "
            f"{ResultFormatter.format_coverage(result.coverage)}",
            "",
            f"Gap to nominal level: "
            f"{ResultFormatter.format_gap(result.coverage, result.confidence_level)}",
            "",
            "## Trials",
            "",
            "| Trial | Lower | Upper | Mean | Contains mean |",
            "|-------|-------|-------|------|---------------|",
        ]

        for trial in result.trials:
            hit = "Y" if trial.contains(result.population_mean) else "-"
            lines.append(
                f"| {trial.id} | {trial.lower:.4f} | {trial.upper:.4f} | "
                f"{trial.mean:.4f} | {hit} |"
            )

        return "\n".join(lines)

    def generate_study_table(self, study: StudyResult) -> str:
        lines = [
            "# Coverage Study Results",
            "",
            f"Population: N({study.population_mean:g}, {study.population_std_dev:g}^2)",
            "",
            "| n | Level | z | Coverage | Std | Mean width |",
            "|---|-------|---|----------|-----|------------|",
        ]

        for cell in study.cells:
            lines.append(
                f"| {cell.sample_size} | {cell.confidence_level:g}% | "
                f"{cell.critical_value:g} | "
                f"{ResultFormatter.format_percentage(cell.mean_coverage * 100.0)} | "
                f"{cell.std_coverage:.4f} | {cell.mean_width:.4f} |"
            )

        return "\n".join(lines)

    def save_report(self, content: str, filename: str) -> Path:
        filepath = self._output_dir / filename

        with open(filepath, "w", encoding="utf-8") as f:
            f.write(content)

        return filepath
