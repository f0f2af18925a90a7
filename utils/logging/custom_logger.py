from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Optional
import sys


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


@dataclass
class LogRecord:
    timestamp: str
    level: LogLevel
    module: str
    message: str
    
    def format(self, include_timestamp: bool = True) -> str:
        level_name = self.level.name
        
        if include_timestamp:
            return f"[{self.timestamp}] [{level_name:8s}] [{self.module}] {self.message}"
        return f"[{level_name:8s}] [{self.module}] {self.message}"


class CustomLogger:
    
    _instances: dict[str, "CustomLogger"] = {}
    
    def __init__(
        self,
        name: str,
        level: LogLevel = LogLevel.INFO,
        log_file: Optional[Path] = None,
        console_output: bool = True,
    ):
        self._name = name
        self._level = level
        self._log_file = log_file
        self._console_output = console_output
        
        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            self._file_handle = open(log_file, "a")
        else:
            self._file_handle = None
    
    @classmethod
    def get_instance(
        cls,
        name: str,
        level: LogLevel = LogLevel.INFO,
        log_file: Optional[Path] = None,
    ) -> "CustomLogger":
        if name not in cls._instances:
            cls._instances[name] = cls(name, level, log_file)
        return cls._instances[name]
    
    def _create_record(self, level: LogLevel, message: str) -> LogRecord:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        return LogRecord(
            timestamp=timestamp,
            level=level,
            module=self._name,
            message=message,
        )
    
    def _write(self, record: LogRecord) -> None:
        if record.level < self._level:
            return
        
        formatted = record.format()
        
        if self._console_output:
            stream = sys.stderr if record.level >= LogLevel.ERROR else sys.stdout
            print(formatted, file=stream)
        
        if self._file_handle:
            self._file_handle.write(formatted + "\n")
            self._file_handle.flush()
    
    def debug(self, message: str) -> None:
        self._write(self._create_record(LogLevel.DEBUG, message))
    
    def info(self, message: str) -> None:
        self._write(self._create_record(LogLevel.INFO, message))
    
    def warning(self, message: str) -> None:
        self._write(self._create_record(LogLevel.WARNING, message))
    
    def error(self, message: str) -> None:
        self._write(self._create_record(LogLevel.ERROR, message))
    
    def critical(self, message: str) -> None:
        self._write(self._create_record(LogLevel.CRITICAL, message))
    
    def log_population(
        self,
        size: int,
        mean: float,
        std_dev: float,
    ) -> None:
        message = (
            f"Population: size={size:,}, "
            f"mean={mean:.4f}, "
            f"std_dev={std_dev:.4f}"
        )
        self.info(message)
    
    def log_simulation_result(
        self,
        sample_size: int,
        confidence_level: float,
        critical_value: float,
        num_covered: int,
        num_trials: int,
    ) -> None:
        coverage = num_covered / num_trials * 100.0
        message = (
            f"Simulation: n={sample_size} "
            f"level={confidence_level:g}% z={critical_value:g} "
            f"coverage={coverage:.1f}% ({num_covered}/{num_trials})"
        )
        self.info(message)
    
    def log_study_cell(
        self,
        sample_size: int,
        confidence_level: float,
        mean_coverage: float,
        mean_width: float,
    ) -> None:
        message = (
            f"Study cell: n={sample_size} "
            f"level={confidence_level:g}% "
            f"coverage={mean_coverage * 100.0:.2f}% "
            f"width={mean_width:.4f}"
        )
        self.info(message)
    
    def set_level(self, level: LogLevel) -> None:
        self._level = level
    
    def close(self) -> None:
        if self._file_handle:
            self._file_handle.close()
            self._file_handle = None


def get_logger(
    name: str,
    level: LogLevel = LogLevel.INFO,
    log_file: Optional[Path] = None,
) -> CustomLogger:
    return CustomLogger.get_instance(name, level, log_file)
