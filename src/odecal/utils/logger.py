#########################################################################################
##
##                              CENTRALIZED LOGGING
##                               (utils/logger.py)
##
##         Singleton manager around the standard `logging` module. All odecal
##         loggers live below the `odecal` namespace and stay silent (NullHandler)
##         until `LoggerManager().configure(...)` is called.
##
#########################################################################################

# IMPORTS ===============================================================================

import logging
import sys


# CONSTANTS =============================================================================

ROOT_NAME = "odecal"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# CLASS =================================================================================

class LoggerManager:
    """Singleton owning the `odecal` logger hierarchy.

    Every component requests its logger through :meth:`get_logger`, so a single
    call to :meth:`configure` controls the output of the whole package.

    Example
    -------
    .. code-block:: python

        from odecal import LoggerManager

        LoggerManager().configure(level=logging.DEBUG)
        log = LoggerManager().get_logger("comparison")
        log.info("hello")   # -> "... - odecal.comparison - INFO - hello"
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance


    def __init__(self):
        if self._initialized:
            return

        self._root = logging.getLogger(ROOT_NAME)
        self._root.addHandler(logging.NullHandler())
        self._handler = None
        self._initialized = True


    @property
    def root(self) -> logging.Logger:
        """The `odecal` package logger."""
        return self._root


    def get_logger(self, name: str | None = None) -> logging.Logger:
        """Return the logger `odecal.<name>` (or the package logger)."""
        if not name:
            return self._root
        if name.startswith(ROOT_NAME + ".") or name == ROOT_NAME:
            return logging.getLogger(name)
        return logging.getLogger(f"{ROOT_NAME}.{name}")


    def configure(
        self,
        level: int = logging.INFO,
        stream=None,
        fmt: str = DEFAULT_FORMAT,
    ) -> logging.Logger:
        """Attach a stream handler to the package logger.

        Calling this again replaces the previously installed handler rather
        than stacking a second one.

        Parameters
        ----------
        level : int
            Logging level of the package logger.
        stream : file-like, optional
            Output stream, defaults to ``sys.stdout``.
        fmt : str
            Record format string.

        Returns
        -------
        logging.Logger
            The configured package logger.
        """
        if self._handler is not None:
            self._root.removeHandler(self._handler)

        self._handler = logging.StreamHandler(stream or sys.stdout)
        self._handler.setFormatter(logging.Formatter(fmt))
        self._root.addHandler(self._handler)
        self._root.setLevel(level)
        return self._root


    def set_level(self, level: int) -> None:
        """Change the package logging level."""
        self._root.setLevel(level)


    def reset(self) -> None:
        """Remove the installed handler and restore the default level."""
        if self._handler is not None:
            self._root.removeHandler(self._handler)
            self._handler = None
        self._root.setLevel(logging.NOTSET)
