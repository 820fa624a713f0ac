#!/usr/bin/env python
import json
import logging
import os
import sys
import typing
from pathlib import Path

import toml
from rich.logging import RichHandler
from traitlets import Bool, Enum, Integer, List, Unicode
from traitlets.config import Application, Configurable, default
from traitlets.config.loader import Config

from pylitopts.helpformat import LINE_WIDTH, MAX_COLUMN


CONFIG_ENV_VAR = "LITOPTS_CONFIG"
CONFIG_HOME_DIR = ".pylitopts"


class General(Configurable):
    """ """

    colors = Enum(
        ["never", "always", "auto"],
        default_value="never",
        help="""Default color mode of the example programs, overridden by `--color`.""",
    ).tag(config=True)


class Scanning(Configurable):
    """Argument scanning."""

    posix = Bool(
        False,
        help="""Stop option processing at the first free argument (POSIX behaviour).
Otherwise options and free arguments may be freely mixed.""",
    ).tag(config=True)


class HelpFormat(Configurable):
    """Layout of generated option help."""

    line_width = Integer(LINE_WIDTH, help="Help text is word-wrapped at this column.").tag(config=True)
    max_column = Integer(MAX_COLUMN, help="Help text never starts right of this column.").tag(config=True)


class PyLitOpts(Application):
    description = "pyLitOpts application"
    config_file = Unicode(default_value="litopts_conf.py", help="base name of config file").tag(config=True)

    classes = List([General, Scanning, HelpFormat])

    @default("log_level")
    def _default_value(self):
        return logging.WARNING

    def initialize(self, argv=None):
        """Command line arguments are not evaluated here, scanning them is up to the caller."""
        from pylitopts import __version__ as pylitopts_version

        PyLitOpts.version = pylitopts_version
        if argv:
            PyLitOpts.name = Path(argv[0]).name
        else:
            PyLitOpts.name = Path(sys.argv[0]).name

    def start(self):
        has_handlers = logging.getLogger().hasHandlers()
        if has_handlers:
            self.log = logging.getLogger()
        config_path = self._find_config_file(self.config_file)
        if config_path is not None:
            self.read_configuration_file(config_path)
        self._create_components()
        if not has_handlers:
            self._setup_logger()
        self.log.debug(f"pylitopts version: {self.version}")

    def _setup_logger(self):
        # Remove any handlers installed by `traitlets`.
        for hdl in list(self.log.handlers):
            self.log.removeHandler(hdl)

        rich_handler = RichHandler(
            rich_tracebacks=True,
            log_time_format=self.log_datefmt,
            level=self.log_level,
            keywords=["FREE", "FLAG", "VALUE", "OPTIONAL_VALUE", "MISSING_VALUE", "UNKNOWN"],
        )
        self.log.addHandler(rich_handler)
        self.log.setLevel(self.log_level)

    def _create_components(self) -> None:
        self.general = General(config=self.config, parent=self)
        self.scanning = Scanning(config=self.config, parent=self)
        self.help_format = HelpFormat(config=self.config, parent=self)

    def _find_config_file(self, file_name: str) -> typing.Optional[Path]:
        """Look for `file_name`: environment variable, current directory, then ``~/.pylitopts``."""
        env_value = os.environ.get(CONFIG_ENV_VAR)
        if env_value:
            pth = Path(env_value)
            if pth.is_file():
                return pth
        pth = Path(file_name)
        if pth.is_file():
            return pth
        pth = Path.home() / CONFIG_HOME_DIR / file_name
        if pth.is_file():
            return pth
        return None

    def read_configuration_file(self, file_name: typing.Union[str, Path]):
        pth = Path(file_name)
        if not pth.exists():
            raise FileNotFoundError(f"Configuration file {str(file_name)!r} does not exist.")
        suffix = pth.suffix.lower()
        if suffix == ".py":
            self.load_config_file(str(pth.resolve()))
            return self.config
        if suffix == ".json":
            reader = json
        elif suffix == ".toml":
            reader = toml
        else:
            raise ValueError(f"Unknown file type for config: {suffix}")
        with pth.open("r", encoding="utf-8") as f:
            cfg = reader.loads(f.read())
        if cfg:
            self.update_config(Config(cfg))
        return cfg


application: typing.Optional[PyLitOpts] = None


def create_application(argv: typing.Optional[typing.List[str]] = None) -> PyLitOpts:
    global application
    if application is not None:
        return application
    application = PyLitOpts()
    application.initialize(argv if argv is not None else sys.argv)
    application.start()
    return application


def create_application_from_config(config: typing.Optional[dict] = None) -> PyLitOpts:
    """Create an application from a configuration mapping, no configuration file is read.

    Example
    -------

    app = create_application_from_config({"Scanning": {"posix": True}})
    """
    app = PyLitOpts(config=Config(config or {}))
    app.initialize()
    app._create_components()
    return app


def get_application() -> PyLitOpts:
    global application
    if application is None:
        application = create_application()
    return application


def set_application(app: PyLitOpts) -> None:
    global application
    application = app


def reset_application() -> None:
    global application
    del application
    application = None
