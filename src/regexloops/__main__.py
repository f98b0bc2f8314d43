"""Main entry point for the RegexLoops command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from . import __version__, paths
from .config import RunnerConfig, load_config, load_default_config
from .logging_utils import setup_logging
from .templates import DEFAULT_CONFIG_YAML
from .workflow import run_demonstrations

logger = logging.getLogger(__name__)


def _parse_args() -> argparse.Namespace:
    """
    Parse command-line arguments for the RegexLoops CLI.

    Returns:
        argparse.Namespace: An object containing the parsed command-line arguments.

    """
    parser = argparse.ArgumentParser(description="Regular-expression and loop demonstrations")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"RegexLoops {__version__}",
        help="Show the version number and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug level logging.",
    )
    # Running with no command behaves like a bare 'run'
    parser.set_defaults(config=None, only=None)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'run' command (the default when no command is given)
    run_parser = subparsers.add_parser("run", help="Run the demonstrations.")
    run_parser.add_argument(
        "--config",
        default=None,
        help="A YAML file of demonstrations (default: the built-in list).",
    )
    run_parser.add_argument(
        "--only",
        nargs="+",
        metavar="NAME",
        default=None,
        help="Run only the named demonstrations, including disabled ones.",
    )

    # 'list' command
    list_parser = subparsers.add_parser("list", help="List the available demonstrations.")
    list_parser.add_argument(
        "--config",
        default=None,
        help="A YAML file of demonstrations (default: the built-in list).",
    )

    # 'init' command
    init_parser = subparsers.add_parser("init", help=f"Write the built-in demonstrations to {paths.CONFIG_FILE_NAME}.")
    init_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="The directory to write the file in (default: current directory).",
    )

    args = parser.parse_args()
    if args.command is None:
        args.command = "run"
    return args


def _init_project(target_path: str) -> None:
    """Write the built-in demonstration list into `target_path`."""
    path = Path(target_path).resolve()
    if not path.is_dir():
        logger.error("Path is not a directory: %s", path)
        sys.exit(1)

    config_file = path / paths.CONFIG_FILE_NAME
    if config_file.exists():
        logger.warning("Configuration file already exists at: %s", config_file)
        return

    try:
        config_file.write_text(DEFAULT_CONFIG_YAML, encoding="utf-8")
    except OSError:
        logger.exception("Failed to write configuration file")
        sys.exit(1)
    logger.info("Created default configuration at: %s", config_file)
    print(config_file)


def _load_config(config_path: str | None = None) -> RunnerConfig | None:
    """
    Load the demonstration list from `config_path`, or the built-in one.

    Returns:
        An optional RunnerConfig object if loading is successful, otherwise None.

    """
    if config_path is None:
        logger.debug("Using the built-in demonstration list.")
        return load_default_config()

    try:
        logger.info("Loading configuration from: %s", config_path)
        return load_config(config_path)
    except FileNotFoundError:
        logger.exception("Could not find a valid configuration file.")
        return None
    except (yaml.YAMLError, ValueError):
        logger.exception("The configuration file is invalid.")
        return None


def _list_demonstrations(config: RunnerConfig) -> None:
    """Print the name, kind and state of every demonstration."""
    for demo in config.demonstrations:
        state = "enabled" if demo.enabled else "disabled"
        print(f"{demo.name}\t{getattr(demo, 'kind', '?')}\t{state}")


def main() -> None:
    """
    Run the main entry point for the RegexLoops command-line interface.

    1. Parses command-line arguments.
    2. Loads the demonstration list.
    3. Runs, lists, or writes out the demonstrations.
    """
    args = _parse_args()
    setup_logging(version=__version__, debug=args.debug)

    try:
        if args.command == "init":
            _init_project(args.path)
            return

        config = _load_config(args.config)
        if config is None:
            logger.critical("Failed to load configuration. Aborting.")
            sys.exit(1)

        if args.command == "list":
            _list_demonstrations(config)
            return

        run_demonstrations(config, names=args.only)

    except ValueError:
        logger.exception("Invalid demonstrations or selection")
        logger.critical("Could not run the demonstrations. Aborting.")
        sys.exit(1)
    except Exception:
        logger.exception("An unexpected error occurred")
        logger.critical("An unrecoverable error occurred. Please check the logs for details.")
        sys.exit(1)


if __name__ == "__main__":
    main()
