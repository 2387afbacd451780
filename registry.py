# registry.py - command table for kvshell
from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Callable, Optional

import commands

# keys and values share one character class; VALUE is kept as its own name
# so the set pattern reads key=value
IDENTIFIER = r"[a-z0-9_]+"
VALUE = IDENTIFIER
OPTIONAL_WHITESPACE = r"[ ]*"


class CommandName(enum.Enum):
    GET = "get"
    SET = "set"
    DEL = "del"
    VARS = "vars"


class DuplicateCommandError(ValueError):
    pass


@dataclass(frozen=True)
class CommandSpec:
    name: str
    has_args: bool
    pattern: Optional[re.Pattern]
    handler: Callable[..., None]

    def match(self, line: str) -> Optional[tuple[str, ...]]:
        """Return the captured arguments if `line` (already stripped) invokes
        this command, otherwise None."""
        if not self.has_args:
            return () if line == self.name else None
        if not line.startswith(f"{self.name} "):
            return None
        m = self.pattern.fullmatch(line)
        if m is None:
            return None
        return m.groups()


@dataclass(frozen=True)
class Match:
    spec: CommandSpec
    args: tuple[str, ...]


class Registry:
    def __init__(self):
        self.commands: dict[CommandName, CommandSpec] = {}

    def register(self, tag: CommandName, spec: CommandSpec) -> None:
        if tag in self.commands:
            raise DuplicateCommandError(f"command already registered: {tag.value}")
        self.commands[tag] = spec

    def lookup(self, line: str) -> Optional[Match]:
        text = line.strip()
        for spec in self.commands.values():
            args = spec.match(text)
            if args is not None:
                return Match(spec, args)
        return None

    def names(self) -> list[str]:
        return sorted(spec.name for spec in self.commands.values())


def build_registry() -> Registry:
    reg = Registry()

    reg.register(CommandName.VARS, CommandSpec(
        name="vars", has_args=False, pattern=None, handler=commands.cmd_vars))

    reg.register(CommandName.GET, CommandSpec(
        name="get", has_args=True,
        pattern=re.compile(f"get ({IDENTIFIER})"),
        handler=commands.cmd_get))

    set_format = f"set ({IDENTIFIER}){OPTIONAL_WHITESPACE}={OPTIONAL_WHITESPACE}({VALUE})"
    reg.register(CommandName.SET, CommandSpec(
        name="set", has_args=True,
        pattern=re.compile(set_format),
        handler=commands.cmd_set))

    reg.register(CommandName.DEL, CommandSpec(
        name="del", has_args=True,
        pattern=re.compile(f"del ({IDENTIFIER})"),
        handler=commands.cmd_del))

    return reg
