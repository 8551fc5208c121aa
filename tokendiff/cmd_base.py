from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import MutableMapping, TextIO

from tokendiff.cmd_color import Color
from tokendiff.config import DELIMITER_PRESETS, ConfigError, Settings, decode_delimiter
from tokendiff.setup_logging import setup_logging

log = logging.getLogger(__name__)

STDIN_PATH = "-"


class Base:
    def __init__(
        self,
        _dir: Path,
        env: MutableMapping[str, str],
        args: list[str],
        stdin: TextIO,
        stdout: TextIO,
        stderr: TextIO,
    ):
        self.dir: Path = _dir
        self.env: MutableMapping[str, str] = env
        self.args: list[str] = args
        self.stdin: TextIO = stdin
        self.stdout: TextIO = stdout
        self.stderr: TextIO = stderr
        self.status: int | None = None
        self.isatty: bool = stdout.isatty()
        self.settings: Settings = Settings()

    def exit(self, status: int = 0) -> None:
        self.status = status
        raise ExitSignal(self.status)

    def execute(self) -> int:
        try:
            self.load_settings()
            self.run()
            self.status = 0
        except ExitSignal as e:
            self.status = e.status

        self.stdout.flush()
        self.stderr.flush()

        assert self.status is not None
        return self.status

    def load_settings(self) -> None:
        try:
            self.settings = Settings.from_env(self.env)
        except ConfigError as e:
            self.eprintln(f"fatal: {e}")
            self.exit(128)

        setup_logging(self.settings)

    def expanded_path(self, path: str) -> Path:
        return (self.dir / path).absolute()

    def fmt(self, style: str | list[str], string: str) -> str:
        return Color.format(style, string) if self.isatty else string

    def run(self) -> None:
        raise NotImplementedError(f"{self.__class__.__name__}.run() not implemented")

    def println(self, string: str) -> None:
        if isinstance(self.stdout, io.BufferedIOBase):
            self.stdout.write((string + "\n").encode("utf-8"))
        else:
            self.stdout.write(string + "\n")

    def eprintln(self, string: str) -> None:
        if isinstance(self.stderr, io.BufferedIOBase):
            self.stderr.write((string + "\n").encode("utf-8"))
        else:
            self.stderr.write(string + "\n")


class CompareOptionsMixin:
    """
    Option parsing shared by commands that compare two inputs:

        -d <delim>, --delimiter=<delim>, --lines, --words, --chars, --no-trim
    """

    args: list[str]
    settings: Settings
    stdin: TextIO

    def define_compare_options(self) -> None:
        self.delimiter: str = self.settings.delimiter
        self.trim: bool = True
        self.paths: list[str] = []
        explicit: str | None = None
        preset: str | None = None

        args_iter = iter(self.args)
        for arg in args_iter:
            if arg in ("-d", "--delimiter"):
                value = next(args_iter, None)
                if value is None:
                    self.usage_error(f"option '{arg}' requires a value")
                    continue
                explicit = self.parse_delimiter(value)
            elif arg.startswith("--delimiter="):
                explicit = self.parse_delimiter(arg.split("=", 1)[1])
            elif arg.startswith("--") and arg[2:] in DELIMITER_PRESETS:
                preset = arg[2:]
            elif arg == "--no-trim":
                self.trim = False
            elif arg == STDIN_PATH or not arg.startswith("-"):
                self.paths.append(arg)
            else:
                self.handle_option(arg)

        if explicit is not None and preset is not None:
            self.usage_error(
                f"option '--delimiter' cannot be used with '--{preset}'"
            )

        if explicit is not None:
            self.delimiter = explicit
        elif preset is not None:
            self.delimiter = DELIMITER_PRESETS[preset]

        if len(self.paths) != 2:
            self.usage_error("two inputs required: <original> <edited>")

        if self.paths.count(STDIN_PATH) > 1:
            self.usage_error("standard input can only be read once")

        log.debug("delimiter=%r trim=%s paths=%r", self.delimiter, self.trim, self.paths)

    def handle_option(self, arg: str) -> None:
        self.usage_error(f"unknown option '{arg}'")

    def parse_delimiter(self, value: str) -> str:
        try:
            return decode_delimiter(value)
        except ConfigError as e:
            self.usage_error(str(e))
            return value

    def usage_error(self, message: str) -> None:
        self.eprintln(f"error: {message}")
        self.exit(129)

    def read_input(self, path: str) -> str:
        if path == STDIN_PATH:
            return self.stdin.read()

        try:
            with open(self.expanded_path(path), "r", encoding="utf-8", newline="") as f:
                return f.read()
        except OSError as e:
            self.eprintln(f"fatal: could not read '{path}': {e.strerror}")
            self.exit(128)
            return ""


class ExitSignal(Exception):
    def __init__(self, status: int = 0) -> None:
        super().__init__(f"Exit with status {status}")
        self.status: int | None = status
