"""Custom exceptions and directory validation for resolved paths."""

import logging
import os
from enum import Enum
from typing import List, Optional, Union

from .domain import Command

logger = logging.getLogger(__name__)


class PathProblem(str, Enum):
    DOES_NOT_EXIST = 'does_not_exist'
    NOT_A_DIRECTORY = 'not_a_directory'


MESSAGES = {
    PathProblem.DOES_NOT_EXIST: 'path does not exist',
    PathProblem.NOT_A_DIRECTORY: 'path is not a directory',
}


class KeysManagerConfigError(Exception):
    """Base exception for configuration resolution errors."""
    pass


class InvalidPathError(KeysManagerConfigError):
    """A configured directory is missing or is not a directory.

    ``field`` is the user-facing field label ("Input" or "Translations").
    """

    def __init__(self, field: str, problem: PathProblem, path: str):
        super().__init__(f"{field} {MESSAGES[problem]}")
        self.field = field
        self.problem = problem
        self.path = path


class WorkspaceConfigError(KeysManagerConfigError):
    """Raised when the workspace config file cannot be read or parsed."""

    def __init__(self, file_path: str, reason: str):
        super().__init__(f"Invalid workspace config {file_path}: {reason}")
        self.file_path = file_path
        self.reason = reason


def check_directory(path: str) -> Optional[PathProblem]:
    """Return the problem with ``path``, or None when it is an existing directory."""
    try:
        if not os.path.exists(path):
            return PathProblem.DOES_NOT_EXIST
        if not os.path.isdir(path):
            return PathProblem.NOT_A_DIRECTORY
    except OSError:
        return PathProblem.DOES_NOT_EXIST
    return None


def validate_paths(
    input_paths: List[str],
    translations_path: Optional[str],
    command: Optional[Union[Command, str]] = None
) -> Optional[InvalidPathError]:
    """Validate resolved directories.

    Input paths are checked in order and the first failure is returned.
    The translations path is only required when running ``find``, since
    ``extract`` may create it.

    Returns:
        The first InvalidPathError found, or None if everything is valid.
    """
    for path in input_paths:
        problem = check_directory(path)
        if problem:
            logger.debug(f"Input path {path} failed validation: {problem.value}")
            return InvalidPathError('Input', problem, path)

    if command == Command.FIND and translations_path is not None:
        problem = check_directory(translations_path)
        if problem:
            logger.debug(f"Translations path {translations_path} failed validation: {problem.value}")
            return InvalidPathError('Translations', problem, translations_path)

    return None
