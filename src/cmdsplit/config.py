import os
from typing import Literal, Mapping, Optional

from .types_ import BaseModel

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
OutputFormat = Literal["table", "json"]

ENV_PREFIX = "CMDSPLIT_"


class SplitterConfig(BaseModel):
    log_level: LogLevel = "WARNING"
    output_format: OutputFormat = "table"

    class Config:
        extra = "forbid"
        validate_assignment = True

    def update(
        self,
        log_level: Optional[LogLevel] = None,
        output_format: Optional[OutputFormat] = None,
    ) -> None:
        if log_level is not None:
            self.log_level = log_level
        if output_format is not None:
            self.output_format = output_format


def load_config(environ: Optional[Mapping[str, str]] = None) -> SplitterConfig:
    """Build a config from CMDSPLIT_* environment variables."""
    env = os.environ if environ is None else environ
    values: dict[str, str] = {}
    log_level = env.get(ENV_PREFIX + "LOG_LEVEL")
    if log_level:
        values["log_level"] = log_level.upper()
    output_format = env.get(ENV_PREFIX + "OUTPUT_FORMAT")
    if output_format:
        values["output_format"] = output_format.lower()
    return SplitterConfig(**values)  # type: ignore[arg-type]


CONFIG = SplitterConfig()
