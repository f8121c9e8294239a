"""
Command line reconstruction for the generation comment.
"""

from pathlib import Path

import click

COMMAND_NAME = "sql_schema_to_code"

# Options that do not change the generated output
_IGNORED_OPTIONS = {"verbose"}


def _format_value(param: click.Parameter, value) -> str:
    # Paths by name only, the output file may not exist yet
    if isinstance(param.type, click.Path):
        return Path(str(value)).name
    return str(value)


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Rebuild the invocation from the active Click context.

    Arguments come first, then options that differ from their defaults.
    Without an active context only the command name is returned.
    """
    ctx = click.get_current_context(silent=True)
    if ctx is None or not ctx.params:
        return COMMAND_NAME

    arguments = []
    options = []
    for param in click_command.params:
        value = ctx.params.get(param.name)
        if value is None or value == param.default:
            continue
        if isinstance(param, click.Argument):
            arguments.append(_format_value(param, value))
        elif param.name not in _IGNORED_OPTIONS:
            flag = param.opts[0]
            options.extend([flag] if param.is_flag else [flag, _format_value(param, value)])

    return " ".join([COMMAND_NAME, *arguments, *options])
