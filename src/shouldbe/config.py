from __future__ import annotations

from enum import Enum
from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator

from shouldbe.reporting import AssertionReporter, PytestReporter, Reporter, set_reporter
from shouldbe.verbose import setup_logger


class ReporterType(str, Enum):
    ASSERTION = "assertion"
    PYTEST = "pytest"


class ShouldConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    reporter: ReporterType = ReporterType.ASSERTION
    log_file: str | None = None
    verbose: bool = False

    @field_validator("log_file")
    @classmethod
    def expand_log_file(cls, v: str | None) -> str | None:
        """Expand ${VAR} references; a reference without a default must be set."""
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as e:
            # Variable is missing and has no default
            raise ValueError(f"log_file has a missing environment variable: {v}") from e


def build_reporter(reporter_type: ReporterType) -> Reporter:
    if reporter_type == ReporterType.PYTEST:
        return PytestReporter()
    return AssertionReporter()


def load_config(path: Path) -> ShouldConfig:
    """Load and validate a shouldbe config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    config = ShouldConfig(**raw)

    # Resolve a relative log_file against the config file location
    if config.log_file is not None:
        log_path = Path(config.log_file)
        if not log_path.is_absolute():
            config.log_file = str((config_dir / log_path).resolve())

    return config


def configure(config: ShouldConfig) -> Reporter:
    """Install the configured reporter and trace logger; return the reporter."""
    reporter = build_reporter(config.reporter)
    set_reporter(reporter)
    log_file = Path(config.log_file) if config.log_file else None
    logger = setup_logger(log_file, verbose=config.verbose)
    logger.debug(
        f"Configured reporter={config.reporter.value} log_file={config.log_file} "
        f"verbose={config.verbose}"
    )
    return reporter
