"""Command-line entry point: the root command and its sub-commands."""

from __future__ import annotations

import logging
import sys
import threading

import click

from ehrplus.config import load_config
from ehrplus.containers import ContainerMenu, list_containers
from ehrplus.demo import (
    ACTION_DELAY,
    ENVIRONMENTS,
    DemoMenu,
    FormAnswers,
    greeting,
    perform_action,
)

PROG_NAME = "ehrplus-cli"

_KEY_NAMES = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1b": "esc",
    "\r": "enter",
    "\n": "enter",
    "\x03": "ctrl+c",
}


def _read_key() -> str:
    """Read one key press and name it; an empty string means end of input."""
    if sys.stdin.isatty():
        try:
            raw = click.getchar()
        except KeyboardInterrupt:
            return "ctrl+c"
        except EOFError:
            return ""
    else:
        raw = sys.stdin.read(1)
        if raw == "\x1b":
            sequence = raw + sys.stdin.read(2)
            raw = sequence if sequence in _KEY_NAMES else raw
    return _KEY_NAMES.get(raw, raw)


def _render(view: str) -> None:
    click.clear()
    click.echo(view, nl=False)


def _ask_form() -> FormAnswers:
    name = click.prompt("What's your name?", default="", show_default=False)
    click.echo("Choose environment")
    for label, value in ENVIRONMENTS:
        click.echo(f"  {label} ({value})")
    environment = click.prompt(
        "Environment",
        type=click.Choice([value for _, value in ENVIRONMENTS]),
        default=ENVIRONMENTS[0][1],
    )
    confirm = click.confirm("Continue with demo?", default=False)
    return FormAnswers(name=name, environment=environment, confirm=confirm)


def _run_action(menu: DemoMenu, action: str) -> None:
    perform_action(action)
    menu.finish_action()


def _run_demo_menu() -> None:
    menu = DemoMenu()
    timers: list[threading.Timer] = []
    try:
        _render(menu.view())
        while not menu.exited:
            key = _read_key()
            if not key:
                break
            action = menu.update(key)
            if action:
                timer = threading.Timer(ACTION_DELAY, _run_action, args=(menu, action))
                timer.daemon = True
                timers.append(timer)
                timer.start()
            _render(menu.view())
    finally:
        for timer in timers:
            timer.cancel()


def _run_container_menu(menu: ContainerMenu) -> None:
    _render(menu.view())
    while True:
        key = _read_key()
        if not key or menu.update(key):
            break
        _render(menu.view())
    _render(menu.view())


@click.group(name=PROG_NAME, invoke_without_command=True)
@click.option(
    "--config",
    "config_file",
    default="",
    help="config file (default is $HOME/.ehrplus-cli.yaml)",
)
@click.option("-t", "--toggle", is_flag=True, default=False, help="Help message for toggle")
@click.pass_context
def _cli(ctx: click.Context, config_file: str, toggle: bool) -> None:
    """Command-line tools for EHRPlus."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return
    settings = load_config(config_file or None)
    if settings.config_file is not None:
        click.echo(f"Using config file: {settings.config_file}", err=True)
    ctx.obj = settings


@_cli.command(name="system")
def _system() -> None:
    """Report that the system command ran."""
    click.echo("system called")


@_cli.command(name="version")
@click.pass_context
def _version(ctx: click.Context) -> None:
    """Pick from the running Docker containers."""
    menu = ContainerMenu(choices=list_containers())
    try:
        _run_container_menu(menu)
    except OSError as exc:
        click.echo(f"Alas, there's been an error: {exc}", nl=False)
        ctx.exit(1)


@_cli.command(name="demo")
@click.pass_context
def _demo(ctx: click.Context) -> None:
    """Interactive TUI demo showcasing menus, forms, styling and database features.

    An interactive demonstration of the terminal UI including a menu,
    database operations, SSH connection simulation and interactive forms.
    """
    answers = _ask_form()
    message = greeting(answers)
    click.echo(message + "\n" if answers.confirm else message)
    try:
        _run_demo_menu()
    except OSError as exc:
        click.echo(f"Error running program: {exc}", nl=False)
        ctx.exit(1)


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the process exit status."""
    logger = logging.getLogger("ehrplus")
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(message)s", datefmt="%Y/%m/%d %H:%M:%S")
    )
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    try:
        result = _cli.main(args=argv, prog_name=PROG_NAME, standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return 1
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    finally:
        logger.removeHandler(handler)
    return result if isinstance(result, int) else 0