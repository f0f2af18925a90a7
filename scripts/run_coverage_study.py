import argparse
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))

from configs.config_loader import build_config_from_dict
from configs.config_loader import build_config_from_yaml
from data.population.normal_generator import NormalGenerator
from evaluation.protocols.simulation_protocol import reset_population
from experiments.coverage_studies.study_configs import STUDY_DESCRIPTIONS
from experiments.coverage_studies.study_configs import StudyType
from experiments.coverage_studies.study_configs import get_study_config
from experiments.coverage_studies.study_runner import CoverageStudyRunner
from utils.exceptions import SimulationError
from utils.logging.custom_logger import LogLevel
from utils.logging.custom_logger import get_logger
from utils.reproducibility.random_generator import create_generator
from visualization.reporters.markdown_reporter import MarkdownReporter
from visualization.reporters.result_formatter import ResultExporter


def parse_arguments(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Repeat coverage simulations over a grid of sample sizes and levels"
    )
    
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML or JSON experiment config with a study section",
    )
    parser.add_argument(
        "--study",
        type=str,
        default=None,
        choices=[t.name.lower() for t in StudyType],
        help="Preset grid; overrides the config study section",
    )
    parser.add_argument(
        "--num-trials",
        type=int,
        default=100,
        help="Trials per simulation run (presets only)",
    )
    parser.add_argument(
        "--num-repeats",
        type=int,
        default=50,
        help="Simulation runs per grid cell (presets only)",
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
        "--no-progress",
        action="store_true",
        help="Disable the progress bar",
    )
    
    return parser.parse_args(argv)


def run_study(args: argparse.Namespace) -> dict:
    overrides = {"seed": args.seed} if args.seed is not None else None
    if args.config is not None:
        config = build_config_from_yaml(args.config, overrides, root_dir=args.output_dir)
    else:
        config = build_config_from_dict(
            {"experiment_name": "ci_coverage_study", **(overrides or {})},
            root_dir=args.output_dir,
        )
    
    config.paths.create_directories()
    
    logger = get_logger(
        name="run_coverage_study",
        level=LogLevel.DEBUG if config.debug_mode else LogLevel.INFO,
        log_file=config.paths.logs / "study.log",
    )
    
    study_config = config.study
    if args.study is not None:
        study_type = StudyType[args.study.upper()]
        study_config = get_study_config(
            study_type,
            num_trials=args.num_trials,
            num_repeats=args.num_repeats,
        )
        logger.info(f"Study preset: {STUDY_DESCRIPTIONS[study_type]}")
    
    rng = create_generator(config.seed)
    population = reset_population(
        config.population.size,
        config.population.mean,
        config.population.std_dev,
        generator=NormalGenerator(rng=rng),
    )
    logger.log_population(population.size, population.mean, population.std_dev)
    
    logger.info(
        f"Running {study_config.num_cells} cells x "
        f"{study_config.num_repeats} repeats x {study_config.num_trials} trials"
    )
    
    runner = CoverageStudyRunner(
        population=population,
        study_config=study_config,
        rng=rng,
        method=config.simulation.critical_value_method,
        logger=logger,
    )
    study = runner.run(show_progress=not args.no_progress)
    
    results = study.to_dict()
    
    exporter = ResultExporter(config.paths.results)
    results_path = exporter.export_summary(
        config.experiment_name,
        config.to_dict(),
        results,
        "study_results.json",
    )
    
    reporter = MarkdownReporter(config.paths.results)
    reporter.save_report(reporter.generate_study_table(study), "study_summary.md")
    
    logger.info(f"Results saved to: {results_path}")
    
    return results


def main(argv=None) -> int:
    args = parse_arguments(argv)
    
    try:
        run_study(args)
    except (SimulationError, FileNotFoundError, KeyError) as e:
        get_logger("run_coverage_study").error(f"Study failed: {e}")
        return 1
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
