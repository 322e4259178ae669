"""Shared helpers for CLI commands."""

from typing import Optional

import click

from ...core.base import UIPrompt
from ...core.exceptions import ConfigurationError


def build_manager(ctx: click.Context, prompt: Optional[UIPrompt] = None):
    """Build a TempoManager from the group's global options."""
    from ... import TempoManager

    options = ctx.obj or {}
    try:
        return TempoManager(
            prompt=prompt,
            load_builtin=options.get("builtin", True),
            template_file=options.get("templates"),
        )
    except ConfigurationError as e:
        raise click.ClickException(str(e))
