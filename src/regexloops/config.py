"""Handles the parsing and validation of RegexLoops demonstration files."""

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .templates import DEFAULT_CONFIG_YAML
from .types import BaseDemo, Demonstration

logger = logging.getLogger(__name__)


class RunnerConfig(BaseModel):
    """The root configuration: an ordered list of demonstrations."""

    demonstrations: list[Demonstration] = Field(default_factory=list)

    @field_validator("demonstrations")
    @classmethod
    def validate_unique_names(cls, demos: list[BaseDemo]) -> list[BaseDemo]:
        seen: set[str] = set()
        for demo in demos:
            if demo.name in seen:
                msg = f"Demonstration name '{demo.name}' is used more than once."
                raise ValueError(msg)
            seen.add(demo.name)
        return demos

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RunnerConfig":
        """
        Create a RunnerConfig from a dictionary.

        Raises:
            ValueError: If the data does not describe a valid demonstration list.

        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            msg = f"Invalid or missing configuration: {e}"
            raise ValueError(msg) from e

    def select(self, names: Sequence[str] | None = None) -> list[BaseDemo]:
        """
        Return the demonstrations to run, in declared order.

        Without `names`, every enabled demonstration is returned. With `names`,
        exactly the named demonstrations are returned, whether enabled or not.

        Raises:
            ValueError: If a name does not refer to any demonstration.

        """
        if not names:
            return [demo for demo in self.demonstrations if demo.enabled]

        known = {demo.name for demo in self.demonstrations}
        unknown = [name for name in names if name not in known]
        if unknown:
            msg = f"Unknown demonstration(s): {', '.join(unknown)}. Available: {', '.join(sorted(known))}."
            raise ValueError(msg)
        wanted = set(names)
        return [demo for demo in self.demonstrations if demo.name in wanted]


class StrictSingleQuoteLoader(yaml.SafeLoader):
    """
    A custom YAML loader that enforces the use of single quotes for all strings.

    Double-quoted strings interpret backslash escapes, which silently changes
    regular expressions such as '\\d', so they are rejected.
    """


def _construct_scalar(loader: StrictSingleQuoteLoader, node: yaml.ScalarNode) -> Any:  # noqa: ANN401
    """Construct a scalar node, but first check its style."""
    if node.style == '"':
        line = node.start_mark.line + 1
        col = node.start_mark.column + 1
        msg = f"Double-quoted string found at line {line}, column {col}. Please use single quotes (') instead."
        raise yaml.YAMLError(msg)
    return loader.construct_scalar(node)


StrictSingleQuoteLoader.add_constructor("tag:yaml.org,2002:str", _construct_scalar)


def parse_config(content: str) -> RunnerConfig:
    """
    Parse and validate a YAML demonstration document.

    Raises:
        yaml.YAMLError: If there is a syntax error in the YAML document.
        ValueError: If the document is not a valid demonstration list.

    """
    try:
        data = yaml.load(content, Loader=StrictSingleQuoteLoader)  # noqa: S506
    except yaml.YAMLError as e:
        msg = f"Error parsing YAML config file: {e}"
        raise yaml.YAMLError(msg) from e

    if not isinstance(data, dict):
        msg = "Invalid or missing configuration: the document must be a YAML mapping (dictionary)."
        raise ValueError(msg)  # noqa: TRY004

    config = RunnerConfig.from_dict(data)
    logger.debug("Parsed %d demonstration(s).", len(config.demonstrations))
    return config


def load_config(config_path: str) -> RunnerConfig:
    """
    Load, parse, and validate a YAML demonstration file.

    Args:
        config_path: The path to the YAML file.

    Returns:
        A RunnerConfig object representing the validated demonstrations.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If there is a syntax error in the YAML file.
        ValueError: If the configuration is invalid.

    """
    path = Path(config_path)
    if not path.is_file():
        msg = f"Configuration file not found at: {config_path}"
        raise FileNotFoundError(msg)

    with path.open(encoding="utf-8") as f:
        content = f.read()
    return parse_config(content)


def load_default_config() -> RunnerConfig:
    """Return the built-in demonstration list."""
    return parse_config(DEFAULT_CONFIG_YAML)
