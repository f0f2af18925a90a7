import argparse
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))

from configs.base_config import BaseConfig
from configs.config_loader import build_config_from_dict
from configs.config_loader import build_config_from_yaml
from evaluation.protocols.simulation_protocol import SimulationSession
from utils.exceptions import SimulationError
from utils.io.config_loader import ConfigLoader
from utils.logging.custom_logger import LogLevel
from utils.logging.custom_logger import get_logger
from utils.reproducibility.random_generator import create_generator
from visualization.reporters.markdown_reporter import MarkdownReporter
from visualization.reporters.result_formatter import ResultExporter
from visualization.reporters.result_formatter import ResultFormatter


def parse_arguments(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Draw repeated samples and report confidence interval coverage"
    )
    
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML or JSON experiment config",
    )
    parser.add_argument(
        "--experiment-name",
        type=str,
        default=None,
        help="Experiment name (overrides config)",
    )
    parser.add_argument(
        "--sample-size",
        type=int,
        default=None,
        help="Observations per sample",
    )
    parser.add_argument(
        "--confidence-level",
        type=float,
        default=None,
        help="Two-sided confidence level in percent",
    )
    parser.add_argument(
        "--num-trials",
        type=int,
        default=None,
        help="Number of samples (intervals) to draw",
    )
    parser.add_argument(
        "--method",
        type=str,
        default=None,
        choices=["table", "exact"],
        help="Critical value lookup method",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("./"),
        help="Root directory for outputs",
    )
    parser.add_argument(
        "--export",
        action="store_true",
        help="Write JSON, CSV and Markdown results",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every trial",
    )
    
    return parser.parse_args(argv)


def collect_overrides(args: argparse.Namespace) -> dict:
    overrides: dict = {}
    
    flag_paths = {
        "experiment_name": args.experiment_name,
        "seed": args.seed,
        "simulation.sample_size": args.sample_size,
        "simulation.confidence_level": args.confidence_level,
        "simulation.num_trials": args.num_trials,
        "simulation.critical_value_method": args.method,
    }
    for key_path, value in flag_paths.items():
        if value is not None:
            ConfigLoader.set_nested(overrides, key_path, value)
    
    return overrides


def load_config(args: argparse.Namespace) -> BaseConfig:
    overrides = collect_overrides(args)
    
    if args.config is not None:
        return build_config_from_yaml(args.config, overrides, root_dir=args.output_dir)
    
    base = {"experiment_name": "ci_coverage_default"}
    return build_config_from_dict(
        ConfigLoader.deep_merge(base, overrides),
        root_dir=args.output_dir,
    )


def simulate(args: argparse.Namespace) -> dict:
    config = load_config(args)
    
    log_file = None
    if args.export:
        config.paths.create_directories()
        log_file = config.paths.logs / "simulation.log"
    
    logger = get_logger(
        name="run_simulation",
        level=LogLevel.DEBUG if args.verbose or config.debug_mode else LogLevel.INFO,
        log_file=log_file,
    )
    
    session = SimulationSession(
        population_config=config.population,
        rng=create_generator(config.seed),
        logger=logger,
    )
    session.reset()
    
    result = session.run(config.simulation)
    
    for trial in result.trials:
        logger.debug(
            f"Trial {trial.id}: "
            f"{ResultFormatter.format_interval(trial.mean, trial.margin)} "
            f"[{trial.lower:.4f}, {trial.upper:.4f}]"
        )
    
    logger.info(f"Coverage: {ResultFormatter.format_coverage(result.coverage)}")
    
    if not config.simulation.within_conventional_ranges():
        logger.warning("Parameters are outside the conventional front-end ranges")
    
    results = result.to_dict()
    results["chart"] = ResultFormatter.build_chart_series(result).to_dict()
    
    if args.export:
        exporter = ResultExporter(config.paths.results)
        summary_path = exporter.export_summary(
            config.experiment_name,
            config.to_dict(),
            results,
            "simulation_results.json",
        )
        exporter.export_trials(result, "trials.csv")
        
        reporter = MarkdownReporter(config.paths.results)
        reporter.save_report(
            reporter.generate_simulation_report(config.experiment_name, result),
            "simulation_summary.md",
        )
        logger.info(f"Results saved to: {summary_path}")
    
    return results


def main(argv=None) -> int:
    args = parse_arguments(argv)
    
    try:
        simulate(args)
    except (SimulationError, FileNotFoundError, KeyError) as e:
        get_logger("run_simulation").error(f"Simulation failed: {e}")
        return 1
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
