"""Terminal output for progress, success and error lines."""

import click


class Console:

    def info(self, message: str) -> None:
        click.echo(message)

    def success(self, message: str) -> None:
        click.secho(message, fg="bright_green")

    def error(self, message: str) -> None:
        click.secho(message, fg="red", err=True)
