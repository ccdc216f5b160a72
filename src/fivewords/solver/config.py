"""Five-words solver configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class SolverConfig(BaseSettings):
    """Configuration settings for the five-words solver."""

    word_list_path: str | None = None
    """Word list to read when no path is given on the command line.  If None (default), reads
    standard input."""

    report_interval: int = 100_000
    """Interval (in number of cached search nodes) at which to report progress.  0 disables
    progress reports.  Default: 100,000."""

    expand_anagrams: bool = False
    """Whether to print one line per combination of literal words, instead of one line per
    combination of anagram groups.  Default: False."""

    log_path: str | None = None
    """File to write diagnostics to.  If None (default), diagnostics go to standard error."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = SolverConfig()
