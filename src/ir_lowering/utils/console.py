"""
Central Logging and Console Utilities.

Routes the package's diagnostics through the standard `logging` library,
rendered by `rich`. The translator modules log through
`logging.getLogger(__name__)`; the helpers here are for user-facing messages.

The active console sits behind a proxy so callers (tests, embedding tools)
can swap the destination with `set_console` and read captured output back.

Attributes:
    console (_ConsoleProxy): A stable reference to the active Rich Console.
"""

import logging
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
    "path": "bold blue",
    "code": "bold magenta",
  }
)


class _ConsoleProxy:
  """
  Forwards printing to a swappable `rich.console.Console` backend.

  The proxy installs its own `RichHandler` on the root logger only once it is
  asked to: on `set_backend` or on the first `log_*` helper call. Importing
  the package leaves the host's logging setup untouched. Handlers the proxy
  did not install are never removed.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME, stderr=True)
    self._handler: Optional[RichHandler] = None

  def set_backend(self, new_console: Console) -> None:
    self._backend = new_console
    self._configure_logging()

  def reset(self) -> None:
    self._backend = Console(theme=_THEME, stderr=True)
    if self._handler is not None:
      self._configure_logging()

  @property
  def backend(self) -> Console:
    return self._backend

  @property
  def handler(self) -> Optional[RichHandler]:
    return self._handler

  def ensure_logging(self) -> None:
    if self._handler is None:
      self._configure_logging()

  def _configure_logging(self) -> None:
    """Replaces the proxy's own RichHandler with one bound to the backend."""
    root_logger = logging.getLogger()
    if self._handler is not None:
      root_logger.removeHandler(self._handler)

    self._handler = RichHandler(
      console=self._backend,
      show_time=False,
      omit_repeated_times=False,
      show_path=False,
      markup=True,
      rich_tracebacks=True,
    )
    root_logger.addHandler(self._handler)


  def print(self, *args: Any, **kwargs: Any) -> None:
    self._backend.print(*args, **kwargs)

  def export_text(self, **kwargs: Any) -> str:
    """Returns captured output (requires a backend created with `record=True`)."""
    return self._backend.export_text(**kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Injects a specific console instance for printing and logging.

  Args:
      new_console (Console): The configured Rich console to use globally.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  console.reset()


def get_console() -> Console:
  return console.backend


def log_info(msg: str) -> None:
  """
  Logs an informational message via standard logging.

  Args:
      msg (str): The message content. Can include rich markup like [bold].
  """
  console.ensure_logging()
  logging.info(msg, extra={"markup": True})


def log_success(msg: str) -> None:
  console.ensure_logging()
  logging.log(SUCCESS_LEVEL_NUM, msg, extra={"markup": True})


def log_warning(msg: str) -> None:
  console.ensure_logging()
  logging.warning(msg, extra={"markup": True})


def log_error(msg: str) -> None:
  console.ensure_logging()
  logging.error(msg, extra={"markup": True})
