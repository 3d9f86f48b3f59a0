"""Acquiring note bodies from an external editor or standard input."""

import logging
import shlex
import subprocess
import sys
import tempfile
import time
from pathlib import Path

from .environment import Environment
from .errors import EditorError, EncodingError, ThecaIOError

logger = logging.getLogger(__name__)


def find_editor(env: Environment) -> str:
    """Editor command from $VISUAL, falling back to $EDITOR.

    Raises:
        EditorError: If neither variable is set.
    """
    editor = env.env_var("VISUAL") or env.env_var("EDITOR")
    if not editor:
        raise EditorError("Neither $VISUAL nor $EDITOR is set.")
    return editor


def edit_via_external_tool(initial: str, env: Environment) -> str:
    """Let the user edit ``initial`` in their editor and return the result.

    The text is written to a file in a private temporary directory, the
    editor runs with the current stdin/stdout/stderr, and the file is read
    back once it exits. The directory is removed whatever happens.

    Raises:
        EditorError: If no editor is configured or it fails.
        ThecaIOError: If the temporary file cannot be written or read.
    """
    editor = find_editor(env)

    with tempfile.TemporaryDirectory(prefix="theca") as tmpdir:
        tmppath = Path(tmpdir) / str(int(time.time()))
        try:
            tmppath.write_text(initial + "\n", encoding="utf-8")
        except OSError as e:
            raise ThecaIOError(str(e)) from e

        logger.debug("Launching editor %s on %s", editor, tmppath)
        try:
            result = subprocess.run([*shlex.split(editor), str(tmppath)])
        except OSError as e:
            raise EditorError(f"Couldn't launch editor: {editor}", str(e)) from e
        if result.returncode != 0:
            raise EditorError(f"Editor exited with code {result.returncode}")

        try:
            contents = tmppath.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise EncodingError(str(e)) from e
        except OSError as e:
            raise ThecaIOError(str(e)) from e

    # strip the newline terminating the seed line
    if contents.endswith("\n"):
        contents = contents[:-1]
    return contents


def read_stdin() -> str:
    """Read all of standard input."""
    try:
        return sys.stdin.read()
    except UnicodeDecodeError as e:
        raise EncodingError(str(e)) from e
    except OSError as e:
        raise ThecaIOError(str(e)) from e
