"""Click command classes that can print usage examples.

Pass ``examples=`` to a command (or group) built on these classes and it
gains an ``--examples`` flag that prints the text and exits before any
other option is processed.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Registers ``--examples`` on commands created with example text."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples and exit.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value and self.examples:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{self.examples}")
            ctx.exit(0)


class GraphCommand(_ExamplesMixin, click.Command):
    """A click.Command with optional ``--examples``."""


class GraphGroup(_ExamplesMixin, click.Group):
    """A click.Group with optional ``--examples``; subcommands default to GraphCommand."""

    command_class = GraphCommand
