"""Console utilities for TodoMatic."""

from functools import lru_cache

from rich.console import Console

from todomatic.models.config_models import OutputConfig


@lru_cache(maxsize=1)
def get_console() -> Console:
    """Shared Rich console for all command output.

    Highlighting is off so coordinates and ids are not recoloured mid-line.
    """
    return Console(highlight=False)


def apply_output_config(config: OutputConfig) -> None:
    """Honour the ``output`` section of the configuration."""
    get_console().no_color = not config.color
