# pyright: reportUnusedCallResult=false
"""Per-run state handed from the meta app to the commands."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from projdata.config import Config

_active: contextvars.ContextVar[CLIContext | None] = contextvars.ContextVar(
    "projdata_cli_context", default=None
)


@dataclass(frozen=True, slots=True)
class CLIContext:
    """What a command needs from the global options of one run.

    Attributes:
        config: The merged configuration, or the defaults after a failed load.
        verbose: ``--verbose`` was given.
        quiet: ``--quiet`` was given.
        config_error: Why loading fell back to defaults, if it did.
        logger: Logger for the run, open until the run ends.
    """

    config: Config = field(repr=False)
    verbose: bool = False
    quiet: bool = False
    config_error: str | None = None
    logger: FilteringBoundLogger | None = field(default=None, repr=False)

    @classmethod
    def get_current(cls) -> CLIContext:
        """Return the context of the running command.

        Outside a run (commands invoked directly in tests) this is a context
        holding the default configuration.
        """
        ctx = _active.get()
        if ctx is None:
            from projdata.config import Config  # noqa: PLC0415

            ctx = cls(config=Config.from_dict({}))
        return ctx

    @classmethod
    def set_current(cls, ctx: CLIContext) -> None:
        _active.set(ctx)

    @classmethod
    def reset(cls) -> None:
        _active.set(None)
