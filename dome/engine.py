"""The engine object: logging, file access, debug overlay and entry resolution."""

from __future__ import annotations

import os
import sys
import tarfile
from typing import IO

from .canvas import Canvas
from .paths import (
    FileKind,
    file_info,
    get_base_path,
    is_path_absolute,
    path_base,
    read_entire_file,
    read_file_from_tar,
    resolve_path,
    set_base_path,
    write_entire_file,
)

GAME_WIDTH = 320
GAME_HEIGHT = 240
DEFAULT_LOG_PATH = "DOME-out.log"
DEFAULT_EGG_NAME = "game.egg"
MAIN_FILE_NAME = "main.wren"

WHITE = 0xFFFFFFFF
DEBUG_BACKGROUND = 0x7F000000

MOUSE_CURSORS: tuple[str, ...] = (
    "arrow",
    "ibeam",
    "wait",
    "crosshair",
    "waitarrow",
    "sizenwse",
    "sizenesw",
    "sizewe",
    "sizens",
    "sizeall",
    "no",
    "hand",
)


class EntryResolutionError(Exception):
    """No entry point for a game could be found."""


def find_mouse_cursor_index(name: str) -> int:
    """Return the index of a named system cursor, or -1 if unknown."""
    try:
        return MOUSE_CURSORS.index(name)
    except ValueError:
        return -1


class Engine:
    """Holds the canvas, bundle and log state of a running game."""

    def __init__(
        self,
        stream: IO[str] | None = None,
        log_path: str | os.PathLike[str] | None = DEFAULT_LOG_PATH,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.log_path = log_path
        self._log_file: IO[str] | None = None

        self.canvas = Canvas(GAME_WIDTH, GAME_HEIGHT)
        self.tar: str | None = None
        self.argv: list[str | None] = ["dome", None]

        self.handle_text = True
        self.fused = False
        self.lockstep = False
        self.running = False
        self.initialized = False
        self.vsync_enabled = False
        self.debug_enabled = False
        self.debug_mode = False
        self.log_level = 4
        self.log_color = bool(getattr(self.stream, "isatty", lambda: False)())
        self.padding = 5
        self.exit_status = 0

        self.avg_fps = 58.0
        self.fps_alpha = 0.9
        self.errors: list[str] = []

    def __enter__(self) -> Engine:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _write_log_file(self, message: str) -> None:
        if self.log_path is None:
            return
        if self._log_file is None:
            try:
                self._log_file = open(self.log_path, "w+", encoding="utf-8")
            except OSError:
                return
        self._log_file.write(message)
        self._log_file.flush()

    def log(self, message: str) -> None:
        """Write a message to the output stream and to the log file."""
        self.stream.write(message)
        self.stream.flush()
        self._write_log_file(message)

    def report_error(self, message: str | None) -> None:
        """Log an error message and remember it; None is ignored."""
        if message is None:
            return
        self.errors.append(message)
        self.log(message)

    def write_file(self, path: str, data: bytes | str) -> None:
        """Write data to a game path. Raises FileNotFoundError for a bad path."""
        full_path = resolve_path(path)
        self.log(f"Writing to filesystem: {path}\n")
        write_entire_file(full_path, data)

    def read_file(self, path: str) -> bytes:
        """Read a game file, from the bundle first, then from disk.

        Raises FileNotFoundError if the file cannot be found anywhere.
        """
        name = path[2:] if path.startswith("./") else path

        if self.tar is not None:
            self.log(f"Reading from bundle: {name}\n")
            try:
                return read_file_from_tar(self.tar, name)
            except (OSError, tarfile.TarError) as error:
                if self.debug_mode:
                    self.log(f"Couldn't read {name} from bundle: {error}. Falling back\n")

        full_path = path if path.startswith("/") else get_base_path() + path
        if not os.path.exists(full_path):
            raise FileNotFoundError(f"File doesn't exist: {full_path}")

        self.log(f"Reading from filesystem: {full_path}\n")
        return read_entire_file(full_path)

    def file_exists(self, path: str) -> bool:
        return file_info(path_base(path)) == FileKind.FILE

    def directory_exists(self, path: str) -> bool:
        return file_info(path_base(path)) == FileKind.DIRECTORY

    def draw_debug(self, elapsed: float) -> None:
        """Update the smoothed frame rate and draw the debug overlay."""
        frames_this_second = 1000.0 / (elapsed + 1)
        alpha = self.fps_alpha
        self.avg_fps = alpha * self.avg_fps + (1.0 - alpha) * frames_this_second
        text = f"{self.avg_fps:.1f} FPS"[:19]

        canvas = self.canvas
        start_x = canvas.width - 8 * 8 - 2
        start_y = canvas.height - 8 - 2
        canvas.rectfill(start_x, start_y, 8 * 8 + 2, 10, DEBUG_BACKGROUND)
        canvas.print_text(text, start_x + 1, start_y + 1, WHITE)

        start_x = canvas.width - 9 * 8 - 2
        vsync = "VSync On" if self.vsync_enabled else "VSync Off"
        canvas.print_text(vsync, start_x, start_y - 8, WHITE)
        mode = "Lockstep" if self.lockstep else "Catchup"
        canvas.print_text(mode, start_x, start_y - 16, WHITE)

    def close(self) -> None:
        """Release the log file."""
        if self._log_file is not None:
            self._log_file.close()
            self._log_file = None


def print_title(engine: Engine) -> None:
    engine.log("DOME - Design-Oriented Minimalist Engine\n")


def print_usage(engine: Engine) -> None:
    lines = [
        "\nUsage: \n",
        "  dome [options] [<command>]\n",
        "  dome [options] [--] <entry_path> [<argument>]...\n",
        "  dome -h | --help\n",
        "  dome -v | --version\n",
        "\nAvailable Commands: \n",
        "  embed    Converts a Wren source file to a C include file for plugin development.\n",
        "  fuse     Merges a bundle with DOME to make a standalone file.\n",
        "  help     Displays information on how to use each command.\n",
        "  nest     Bundle a project into a single file.\n",
        "\nOptions: \n",
        "  -b --buffer=<buf>   Set the audio buffer size (default: 11)\n",
    ]
    if os.name == "nt":
        lines.append("  -c --console        Opens a console window for development.\n")
    lines += [
        "  -d --debug          Enables debug mode.\n",
        "  -h --help           Show this screen.\n",
        "  -v --version        Show version.\n",
    ]
    for line in lines:
        engine.log(line)


def _is_bundle(path: str) -> bool:
    try:
        return os.path.isfile(path) and tarfile.is_tarfile(path)
    except OSError:
        return False


def resolve_entry_path(
    engine: Engine, entry_argument: str | None, auto_resolve: bool
) -> str:
    """Locate the game's entry point and return its module file name.

    A directory argument looks for game.egg, then main.wren inside it; a
    file argument is used directly, or opened as a bundle if it is one.
    The base path and working directory move to the game's directory, and
    engine.argv[1] is set to the resolved path. Raises EntryResolutionError
    if nothing is found.
    """
    final_name: str | None = None
    base = get_base_path()
    resolved = False

    if engine.fused:
        entry_path = MAIN_FILE_NAME
    else:
        if entry_argument is not None:
            if is_path_absolute(entry_argument):
                entry_path = entry_argument
            else:
                entry_path = base + entry_argument

            if os.path.isdir(entry_path):
                auto_resolve = True
                set_base_path(entry_path)
            else:
                auto_resolve = False
                final_name = os.path.basename(entry_path)
                set_base_path(os.path.dirname(entry_path) or ".")

            base = get_base_path()
            os.chdir(base)
        elif not auto_resolve:
            raise ValueError("an entry argument is needed when auto_resolve is off")

        if auto_resolve:
            entry_path = base + DEFAULT_EGG_NAME

        if _is_bundle(entry_path):
            engine.tar = entry_path
            final_name = None
            resolved = True
            engine.log(f"Loading bundle {entry_path}\n")

        if engine.tar is None:
            if auto_resolve:
                entry_path = base + MAIN_FILE_NAME
                final_name = None
                resolved = os.path.exists(entry_path)
            else:
                resolved = True

    if not engine.fused and not resolved:
        engine.report_error(
            f"Error: Could not find an entry point at: {os.path.dirname(entry_path)}\n"
        )
        print_usage(engine)
        raise EntryResolutionError(entry_path)

    while len(engine.argv) < 2:
        engine.argv.append(None)
    engine.argv[1] = entry_path
    return final_name if final_name is not None else MAIN_FILE_NAME