"""Command dispatch: turn raw arguments into a command and run it."""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from nerd.errors import NerdError, UnknownCommandError, UsageError


@dataclass
class Invocation:
    """A command name and the parameters that follow it."""
    command: str
    params: List[str] = field(default_factory=list)


@dataclass
class CommandOutcome:
    """Either a success message or the error that stopped the command."""
    message: Optional[str] = None
    error: Optional[NerdError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


def parse_invocation(args: Sequence[str]) -> Invocation:
    """Split arguments (program name excluded) into command and params."""
    if not args:
        raise UsageError("Improper use. Proper use: nerd <command>.")
    return Invocation(command=args[0], params=list(args[1:]))


def dispatch(invocation: Invocation, scaffolder) -> str:
    if invocation.command == "start":
        return scaffolder.start(invocation.params)
    raise UnknownCommandError(invocation.command)


def execute(args: Sequence[str], scaffolder) -> CommandOutcome:
    """Run the command named by *args*; never prints or exits."""
    try:
        message = dispatch(parse_invocation(args), scaffolder)
    except NerdError as e:
        return CommandOutcome(error=e)
    return CommandOutcome(message=message)
