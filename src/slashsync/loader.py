"""
Command loader - discovers and imports command modules from a directory.

Every public ``*.py`` file in the directory is imported, and with
``recursive=True`` so is every file in its non-hidden subdirectories.
Module-level CommandDefinition objects, and handlers decorated with
``CommandRegistry.register``, become declared commands:

    # commands/ping.py
    from slashsync import command

    @command(description="Replies with pong")
    async def ping(interaction):
        ...
"""

from __future__ import annotations

import logging
import sys
from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path
from types import ModuleType

from slashsync.core.datamodels import CommandDefinition

logger = logging.getLogger(__name__)

MODULE_PREFIX = "slashsync_cmd"


def discover_commands(commands_dir: Path, recursive: bool = True) -> list[Path]:
    """
    Discover command files in the given path.

    Args:
        commands_dir: Directory to search
        recursive: Descend into subdirectories

    Returns:
        Sorted list of ``.py`` paths. Hidden and private (``_``) entries are skipped.
    """
    if not commands_dir.exists():
        return []

    if not commands_dir.is_dir():
        logger.warning(f"Commands path is not a directory: {commands_dir}")
        return []

    paths = []
    for entry in sorted(commands_dir.iterdir()):
        if entry.name.startswith((".", "_")):
            continue
        if entry.is_dir():
            if recursive:
                paths.extend(discover_commands(entry, recursive=True))
        elif entry.suffix == ".py":
            paths.append(entry)

    return paths


def load_module(path: Path, module_name: str) -> tuple[ModuleType | None, str]:
    """
    Import a single command file.

    Returns:
        Tuple of (module or None, error_message)
    """
    try:
        spec = spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            return (None, "Could not create module spec")

        module = module_from_spec(spec)
        sys.modules[module_name] = module
        spec.loader.exec_module(module)

        return (module, "")

    except SyntaxError as e:
        sys.modules.pop(module_name, None)
        return (None, f"Syntax error: {e}")
    except ImportError as e:
        sys.modules.pop(module_name, None)
        return (None, f"Import error: {e}")
    except Exception as e:
        sys.modules.pop(module_name, None)
        return (None, f"Error: {e}")


def collect_definitions(module: ModuleType) -> list[CommandDefinition]:
    """Module-level commands, in definition order.

    Picks up CommandDefinition objects (``@command``) and handlers that a
    CommandRegistry decorated (``@registry.register``).
    """
    found: list[CommandDefinition] = []
    for value in vars(module).values():
        if not isinstance(value, CommandDefinition):
            value = getattr(value, "__command_definition__", None)
        if isinstance(value, CommandDefinition) and not any(value is f for f in found):
            found.append(value)
    return found


def load_commands(commands_dir: Path | str, recursive: bool = True) -> list[CommandDefinition]:
    """
    Load all command definitions under a directory.

    Files that fail to import are logged and skipped.

    Args:
        commands_dir: Directory holding command modules
        recursive: Whether or not to look for commands recursively

    Returns:
        Definitions in discovery order.
    """
    commands_dir = Path(commands_dir)
    definitions: list[CommandDefinition] = []

    for path in discover_commands(commands_dir, recursive=recursive):
        relative = path.relative_to(commands_dir).with_suffix("")
        module_name = ".".join((MODULE_PREFIX, *relative.parts))

        module, error = load_module(path, module_name)
        if module is None:
            logger.warning(f"Failed to load command module '{relative}': {error}")
            continue

        found = collect_definitions(module)
        if not found:
            logger.debug(f"No commands in {path}")
        definitions.extend(found)

    logger.info(f"Loaded {len(definitions)} commands from {commands_dir}")
    return definitions
