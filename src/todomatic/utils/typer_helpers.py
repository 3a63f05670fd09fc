"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from todomatic.utils.ui.console import get_console

# Short names accepted in place of the full command
COMMAND_ALIASES = {
    "ls": "list",
    "new": "add",
    "done": "toggle",
    "rm": "delete",
    "open": "map",
}


class SuggestingGroup(TyperGroup):
    """Typer group that resolves command aliases and suggests commands on typos."""

    def resolve_command(self, ctx, args):
        if args and args[0] in COMMAND_ALIASES and args[0] not in self.commands:
            args = [COMMAND_ALIASES[args[0]], *args[1:]]
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            if not args:
                raise
            attempted = args[0]
            candidates = [*self.commands, *COMMAND_ALIASES]
            suggestions = get_close_matches(attempted, candidates, n=3, cutoff=0.6)
            if not suggestions:
                raise

            console = get_console()
            console.print(
                f'[red]Error:[/red] unknown command "{attempted}" for "{ctx.info_name}"'
            )
            console.print()
            if len(suggestions) == 1:
                console.print("[yellow]Did you mean this?[/yellow]")
            else:
                console.print("[yellow]Did you mean one of these?[/yellow]")
            for suggestion in suggestions:
                alias_of = COMMAND_ALIASES.get(suggestion)
                hint = f"  [dim](alias of {alias_of})[/dim]" if alias_of else ""
                console.print(f"        {suggestion}{hint}")
            raise typer.Exit(1) from e
