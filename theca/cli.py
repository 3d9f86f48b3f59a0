"""CLI entry point for theca."""

import logging
from pathlib import Path

import click

from . import __version__
from . import config
from . import editor
from . import repository
from . import render
from . import store
from .environment import Environment, SystemEnvironment
from .errors import ArgumentError, ThecaError
from .layout import LineFormat
from .models import Profile

logger = logging.getLogger(__name__)


class ThecaContext:
    """Resolved settings plus the environment, shared by all commands."""

    def __init__(self, settings: config.Settings, env: Environment):
        self.settings = settings
        self.env = env

    @property
    def color(self) -> bool:
        return self.env.terminal_width() > 0

    def password(self) -> str | None:
        """Key for encrypted profiles, prompting if none was given."""
        if not self.settings.encrypted:
            return None
        if self.settings.key is None:
            self.settings.key = click.prompt("Key", hide_input=True).strip()
        return self.settings.key

    def path(self, new_name: str | None = None) -> Path:
        return config.profile_path(self.settings, self.env, new_name)

    def load(self) -> Profile:
        return store.load_profile(self.path(), self.settings.encrypted, self.password())

    def save(self, profile: Profile, new_name: str | None = None) -> None:
        store.save_profile(self.path(new_name), profile, self.password())

    def edit_body(self, initial: str) -> str:
        return editor.edit_via_external_tool(initial, self.env)

    def line_format(self, items) -> LineFormat:
        return LineFormat.for_items(items, self.settings.condensed, self.env.terminal_width())


pass_theca = click.make_pass_decorator(ThecaContext)


class ThecaGroup(click.Group):
    """Group that treats a bare numeric command as ``view <id>``."""

    def resolve_command(self, ctx, args):
        if args and args[0].isdigit():
            args = ["view", *args]
        return super().resolve_command(ctx, args)


def body_source(body: str | None, use_editor: bool, use_stdin: bool) -> repository.BodySource:
    if sum([bool(body), use_editor, use_stdin]) > 1:
        raise ArgumentError("Only one of -b, --editor or - may be given.")
    return repository.BodySource(text=body, editor=use_editor, stdin=use_stdin)


def status_from_flags(started: bool, urgent: bool, none: bool = False) -> str | None:
    if sum([started, urgent, none]) > 1:
        raise ArgumentError("Only one of --started, --urgent or --none may be given.")
    return repository.resolve_status(started, urgent, none)


def check_dash(dash: str | None) -> bool:
    if dash is not None and dash != "-":
        raise click.UsageError(f"Got unexpected extra argument ({dash})")
    return dash == "-"


@click.group(cls=ThecaGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="theca")
@click.option("--profiles-folder", metavar="PROFILEPATH", help="Path to folder containing profile.json files.")
@click.option("--profile", "-p", metavar="PROFILE", help="Specify non-default profile.")
@click.option("--condensed", "-c", is_flag=True, help="Use the condensed print format.")
@click.option("--encrypted", is_flag=True, help="Specifies using an encrypted profile.")
@click.option("--key", "-k", metavar="KEY", help="Encryption key, prompted for if not given.")
@click.option("--limit", "-l", default=0, type=click.IntRange(min=0), help="Limit the default listing to LIMIT items.")
@click.option("--reverse", is_flag=True, help="Reverse the default listing order.")
@click.option("--debug", is_flag=True, help="Log debugging output to stderr.")
@click.pass_context
def cli(ctx, profiles_folder, profile, condensed, encrypted, key, limit, reverse, debug):
    """theca - cli note taking tool.

    Without a command the notes of the profile are listed. A bare note id
    shows that note.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    env = ctx.obj if ctx.obj is not None else SystemEnvironment()
    settings = config.resolve_settings(
        env,
        profiles_folder=profiles_folder,
        profile=profile,
        encrypted=encrypted,
        key=key,
        condensed=condensed,
    )
    ctx.obj = ThecaContext(settings, env)

    if ctx.invoked_subcommand is None:
        ctx.invoke(list_notes, limit=limit, reverse=reverse)


@cli.command()
@pass_theca
def info(theca: ThecaContext):
    """Show profile statistics."""
    try:
        click.echo(f"# Loading {theca.path()}")
        profile = theca.load()
        click.echo(render.format_stats(repository.stats(profile), theca.color), nl=False)
    except ThecaError as e:
        raise click.ClickException(e.desc) from e


@cli.command("new-profile")
@click.argument("name")
@pass_theca
def new_profile(theca: ThecaContext, name: str):
    """Create a new, empty profile."""
    try:
        path = theca.path(name)
        if path.exists():
            raise ThecaError(f"{path} already exists.")
        folder = config.find_profile_folder(theca.settings, theca.env)
        profile = store.new_profile(folder, theca.settings.encrypted)
        theca.save(profile, name)
        logger.info("Created profile %s", path)
        click.echo(f"created profile {path}")
    except ThecaError as e:
        raise click.ClickException(e.desc) from e


@cli.command("list")
@click.option("--limit", "-l", default=0, type=click.IntRange(min=0), help="Limit listing to LIMIT items.")
@click.option("--reverse", is_flag=True, help="Reverse the listing order.")
@pass_theca
def list_notes(theca: ThecaContext, limit: int = 0, reverse: bool = False):
    """List notes in the profile."""
    try:
        profile = theca.load()
        notes = repository.list_items(profile, limit, reverse)
        if not notes:
            return
        lines = render.format_listing(
            notes,
            theca.line_format(notes),
            condensed=theca.settings.condensed,
            color=theca.color,
        )
        for line in lines:
            click.echo(line)
    except ThecaError as e:
        raise click.ClickException(e.desc) from e


@cli.command()
@click.argument("item_id", metavar="ID", type=click.IntRange(min=0))
@pass_theca
def view(theca: ThecaContext, item_id: int):
    """Show a single note."""
    try:
        profile = theca.load()
        item = repository.get_item(profile, item_id)
        click.echo(render.format_view(item, theca.settings.condensed, theca.color), nl=False)
    except ThecaError as e:
        raise click.ClickException(e.desc) from e


@cli.command()
@click.argument("pattern")
@click.option("--body", is_flag=True, help="Search note bodies instead of titles.")
@click.option("--limit", "-l", default=0, type=click.IntRange(min=0), help="Limit results to LIMIT items.")
@click.option("--reverse", is_flag=True, help="Reverse the result order.")
@pass_theca
def search(theca: ThecaContext, pattern: str, body: bool, limit: int, reverse: bool):
    """Search notes with a regular expression."""
    try:
        profile = theca.load()
        found = repository.search_items(profile, pattern, search_body=body)
        found = repository.limit_items(found, limit, reverse)
        lines = render.format_listing(
            found,
            theca.line_format(found),
            condensed=theca.settings.condensed,
            show_bodies=body,
            color=theca.color,
        )
        for line in lines:
            click.echo(line)
    except ThecaError as e:
        raise click.ClickException(e.desc) from e


@cli.command()
@click.argument("title")
@click.argument("dash", required=False, metavar="[-]")
@click.option("--started", is_flag=True, help="Started status.")
@click.option("--urgent", is_flag=True, help="Urgent status.")
@click.option("--body", "-b", metavar="BODY", help="Set body of the note from BODY.")
@click.option("--editor", "use_editor", is_flag=True, help="Drop to $EDITOR to set the note body.")
@pass_theca
def add(theca: ThecaContext, title: str, dash: str | None, started: bool, urgent: bool,
        body: str | None, use_editor: bool):
    """Add a note.

    A trailing - reads the body from stdin.
    """
    try:
        status = status_from_flags(started, urgent)
        source = body_source(body, use_editor, check_dash(dash))
        profile = theca.load()
        repository.add_item(profile, title, status, source, edit_body=theca.edit_body)
        click.echo("added")
        theca.save(profile)
    except ThecaError as e:
        raise click.ClickException(e.desc) from e


@cli.command()
@click.argument("item_id", metavar="ID", type=click.IntRange(min=0))
@click.argument("title", required=False)
@click.argument("dash", required=False, metavar="[-]")
@click.option("--started", is_flag=True, help="Started status.")
@click.option("--urgent", is_flag=True, help="Urgent status.")
@click.option("--none", "no_status", is_flag=True, help="No status.")
@click.option("--body", "-b", metavar="BODY", help="Set body of the note from BODY.")
@click.option("--editor", "use_editor", is_flag=True, help="Drop to $EDITOR to edit the note body.")
@pass_theca
def edit(theca: ThecaContext, item_id: int, title: str | None, dash: str | None,
         started: bool, urgent: bool, no_status: bool, body: str | None, use_editor: bool):
    """Edit a note's title, status or body.

    Only one of these changes is made, in that order of preference.
    """
    # `theca edit 3 -` puts the dash in the title slot
    if title == "-" and dash is None:
        title, dash = None, "-"
    try:
        status = status_from_flags(started, urgent, no_status)
        source = body_source(body, use_editor, check_dash(dash))
        profile = theca.load()
        repository.edit_item(profile, item_id, title, status, source, edit_body=theca.edit_body)
        click.echo("edited")
        theca.save(profile)
    except ThecaError as e:
        raise click.ClickException(e.desc) from e


@cli.command("del")
@click.argument("item_id", metavar="ID", type=click.IntRange(min=0))
@pass_theca
def delete(theca: ThecaContext, item_id: int):
    """Delete a note."""
    try:
        profile = theca.load()
        if repository.delete_item(profile, item_id):
            click.echo("removed")
        else:
            click.echo("not found")
        theca.save(profile)
    except ThecaError as e:
        raise click.ClickException(e.desc) from e


if __name__ == "__main__":
    cli()
