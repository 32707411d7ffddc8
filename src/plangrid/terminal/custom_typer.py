# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core


class AliasedTyperGroup(typer.core.TyperGroup):
    """TyperGroup whose command names may list comma-separated aliases"""

    _ALIAS_SEPARATOR = re.compile(r" ?, ?")

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self._full_name(cmd_name))

    def _full_name(self, alias: str) -> str:
        """Registered name ("day, d") of the command answering to alias ("d")"""
        for name in self.commands:
            if alias in self._ALIAS_SEPARATOR.split(name):
                return name
        return alias


class OrderedAliasedTyperGroup(AliasedTyperGroup):
    """Lists the layout reports first, then everything else alphabetically"""

    _LEADING_COMMANDS = ["day, d", "week, w", "agenda, a"]

    def list_commands(self, ctx: click.Context) -> list[str]:
        leading = [name for name in self._LEADING_COMMANDS if name in self.commands]
        rest = sorted(name for name in self.commands if name not in leading)
        return leading + rest
