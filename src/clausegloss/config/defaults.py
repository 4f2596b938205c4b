"""Default configuration values for ClauseGloss."""

# Extraction engine defaults
DEFAULT_GLOSSARY_CONFIG: dict[str, int | bool] = {
    "max_definition_length": 260,  # characters, ellipsis included
    "min_definition_length": 15,  # characters
    "min_phrase_length": 20,  # characters, nearest-phrase heuristic only
    "verbose": False,
    "quiet": False,
}

# User-level config directory under $HOME
USER_CONFIG_DIRNAME = ".clausegloss"

# Project-level config file stems, searched in the working directory
PROJECT_CONFIG_STEM = ".clausegloss"

CONFIG_EXTENSIONS: tuple[str, ...] = (".yml", ".yaml")

# Placeholder shown by result sinks for empty fields
EMPTY_PLACEHOLDER = "—"
