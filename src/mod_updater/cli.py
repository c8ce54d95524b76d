"""Command-line interface for the mod updater."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich import print as rprint
from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn
from rich.table import Table

from . import __version__
from .config.settings import DEFAULT_CONFIG_PATH, UpdaterConfig
from .discovery.prism import PrismInstanceLocator
from .exceptions import ConfigError, MultipleInstancesError, SyncError
from .sources.manifest_client import ManifestClient
from .sync.observer import SyncObserver, SyncProgress
from .sync.orchestrator import SyncOrchestrator, SyncResult
from .sync.reconciler import Reconciler
from .utils.file_utils import FileHelper
from .utils.logging import setup_logging

console = Console()

config_option = click.option(
    '--config', '-c',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f'Path to configuration file (default: {DEFAULT_CONFIG_PATH})'
)


class RichProgressObserver(SyncObserver):
    """Shows sync status and download progress in the terminal."""

    def __init__(self, progress: Progress):
        self.progress = progress
        self.task_id = None

    def on_status(self, message: str) -> None:
        self.progress.console.print(f"• {message}")

    def on_progress(self, progress: SyncProgress) -> None:
        if self.task_id is None:
            self.task_id = self.progress.add_task("Syncing", total=progress.total)
        self.progress.update(
            self.task_id,
            completed=progress.current,
            description=progress.mod_name,
        )

    def on_error(self, message: str) -> None:
        self.progress.console.print(f"❌ {message}", style="red bold")


def _load_config(config: Optional[Path]) -> UpdaterConfig:
    try:
        updater_config = UpdaterConfig.load(config)
    except (ConfigError, FileNotFoundError) as e:
        console.print(f"❌ {e}", style="red bold")
        sys.exit(1)

    setup_logging(log_level=updater_config.log_level, log_file=updater_config.log_file)
    return updater_config


def _choose_instance(error: MultipleInstancesError) -> Path:
    """Ask the user which of several matching instances to update."""
    console.print("Several instances match:", style="yellow")
    for number, instance in enumerate(error.instances, start=1):
        rprint(f"   {number}. {instance.name}  [dim]{instance.mods_path}[/dim]")

    choice = click.prompt(
        "Select instance",
        type=click.IntRange(1, len(error.instances)),
        default=1,
    )
    return error.instances[choice - 1].mods_path


def _resolve_target(path: Optional[Path], config: UpdaterConfig) -> Path:
    if path:
        return path
    locator = PrismInstanceLocator(keyword=config.instance_keyword)
    try:
        return locator.resolve()
    except MultipleInstancesError as e:
        return _choose_instance(e)


def _display_sync_result(result: SyncResult) -> None:
    rprint("\n📊 [bold]Summary:[/bold]")
    rprint(f"   • Mods folder: {result.target_path}")
    rprint(f"   • Backup: {result.backup_path}")
    rprint(f"   • Removed: [red]{len(result.removed)}[/red]")
    rprint(f"   • Downloaded: [green]{len(result.downloaded)}[/green]")
    rprint(f"   • Data transferred: {FileHelper.format_file_size(result.bytes_transferred)}")
    rprint(f"   • Duration: {result.duration:.1f}s")


@click.group()
@click.version_option(version=__version__)
def cli():
    """AxolotlSMP Mod Updater

    Keeps your mods folder identical to the server's mod list. A backup of
    the folder is taken before every update.
    """
    pass


@cli.command()
@click.argument('path', required=False, type=click.Path(file_okay=False, path_type=Path))
@config_option
@click.option('--yes', '-y', is_flag=True, help='Do not ask for confirmation')
def sync(path: Optional[Path], config: Optional[Path], yes: bool):
    """Back up and update the mods folder at PATH (discovered when omitted)."""
    updater_config = _load_config(config)

    try:
        target = _resolve_target(path, updater_config)
    except SyncError as e:
        console.print(f"❌ {e}", style="red bold")
        console.print("Pass the mods folder explicitly: mod-updater sync <path>", style="yellow")
        sys.exit(1)

    console.print(f"📁 Mods folder: {target}")
    if not yes and not click.confirm("Files not on the server will be deleted. Continue?", default=True):
        return

    with Progress(
        TextColumn("{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        console=console,
    ) as progress:
        orchestrator = SyncOrchestrator.from_config(updater_config, observer=RichProgressObserver(progress))
        result = orchestrator.run_sync(target)

    if not result.success:
        sys.exit(1)

    console.print("✅ Update completed successfully!", style="green bold")
    _display_sync_result(result)


@cli.command()
@config_option
def manifest(config: Optional[Path]):
    """Show the mod list published by the server."""
    updater_config = _load_config(config)

    try:
        with console.status("Fetching mod list..."):
            mods = ManifestClient(updater_config).fetch_manifest()
    except SyncError as e:
        console.print(f"❌ {e}", style="red bold")
        sys.exit(1)

    table = Table(title=f"Server mods ({updater_config.base_url})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Mod", style="cyan")
    for number, name in enumerate(mods, start=1):
        table.add_row(str(number), name)

    console.print(table)


@cli.command()
@click.argument('path', required=False, type=click.Path(file_okay=False, path_type=Path))
@config_option
def plan(path: Optional[Path], config: Optional[Path]):
    """Show what a sync of PATH would change, without changing anything."""
    updater_config = _load_config(config)

    try:
        target = _resolve_target(path, updater_config)
        client = ManifestClient(updater_config)
        with console.status("Fetching mod list..."):
            remote = client.fetch_manifest()
        sync_plan = Reconciler(client).plan(target, remote)
    except SyncError as e:
        console.print(f"❌ {e}", style="red bold")
        sys.exit(1)

    console.print(f"📁 Mods folder: {target}")
    if sync_plan.is_up_to_date:
        console.print("✅ Mods are up to date", style="green")
        return

    table = Table(title="Pending changes")
    table.add_column("Action", style="magenta")
    table.add_column("Mod", style="cyan")
    for name in sync_plan.to_remove:
        table.add_row("[red]remove[/red]", name)
    for name in sync_plan.to_download:
        table.add_row("[green]download[/green]", name)

    console.print(table)


@cli.command()
@config_option
def instances(config: Optional[Path]):
    """List launcher instances that match the configured keyword."""
    updater_config = _load_config(config)
    locator = PrismInstanceLocator(keyword=updater_config.instance_keyword)

    try:
        found = locator.find_instances()
        counts = [len(Reconciler.list_local(instance.mods_path)) for instance in found]
    except SyncError as e:
        console.print(f"❌ {e}", style="red bold")
        sys.exit(1)

    if not found:
        console.print(f"No instances matching '{updater_config.instance_keyword}' found", style="yellow")
        return

    table = Table(title="Launcher instances")
    table.add_column("Instance", style="cyan")
    table.add_column("Mods folder")
    table.add_column("Mods", justify="right")
    for instance, count in zip(found, counts):
        table.add_row(instance.name, str(instance.mods_path), str(count))

    console.print(table)


@cli.command()
@config_option
def init(config: Optional[Path]):
    """Write a configuration file with default settings."""
    config = config or DEFAULT_CONFIG_PATH
    if config.exists():
        if not click.confirm(f"Configuration file {config} already exists. Overwrite?"):
            return

    UpdaterConfig().to_yaml(config)

    console.print(f"✅ Configuration saved to {config}", style="green")
    console.print("\n📝 Next steps:")
    console.print("1. Edit base_url if your server differs from the default")
    console.print("2. Run 'mod-updater instances' to check your launcher is detected")
    console.print("3. Run 'mod-updater sync' to update your mods")


if __name__ == '__main__':
    cli()
