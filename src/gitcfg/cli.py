"""
CLI entry point for gitcfg.

Modified: 2025-11-07
"""

import logging
import sys
import click
import yaml
from pathlib import Path
from typing import Optional, Tuple
from gitcfg import __version__
from gitcfg.config.settings import Settings
from gitcfg.core.exceptions import GitCfgError
from gitcfg.core.models import Config, RemoteConfig, new_config

logger = logging.getLogger(__name__)


def _load(path: Path) -> Config:
    cfg = new_config()
    cfg.unmarshal(path.read_bytes())
    logger.info(f"Loaded {path} ({len(cfg.remotes)} remotes)")
    return cfg


def _write(cfg: Config, path: Path, sort_remotes: bool) -> None:
    data = cfg.marshal(sort_remotes=sort_remotes)
    path.write_bytes(data)
    logger.info(f"Wrote {path}")


def _fail(e: Exception) -> None:
    click.echo(f"✗ {e}", err=True)
    sys.exit(1)


def _format_text(cfg: Config) -> str:
    lines = [f"core.bare={'true' if cfg.core.is_bare else 'false'}"]
    for name, remote in cfg.remotes.items():
        lines.append(f"remote.{name}.url={remote.url}")
        for spec in remote.fetch:
            lines.append(f"remote.{name}.fetch={spec}")
    return "\n".join(lines)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to settings file (default: ~/.config/gitcfg/config.yaml)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, settings_path: Optional[Path], verbose: bool):
    """gitcfg - typed view over git config files."""
    try:
        settings = Settings.load(settings_path)
    except GitCfgError as e:
        _fail(e)

    level = logging.DEBUG if verbose else getattr(logging, settings.logging.level)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = settings


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["yaml", "text"], case_sensitive=False),
    default=None,
    help="Output format (default: from settings)",
)
@click.pass_obj
def show(settings: Settings, path: Path, output_format: Optional[str]):
    """Show the typed core and remote settings of PATH."""
    try:
        cfg = _load(path)
    except (GitCfgError, OSError) as e:
        _fail(e)

    output_format = (output_format or settings.output.format).lower()
    if output_format == "yaml":
        click.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False), nl=False)
    else:
        click.echo(_format_text(cfg))


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--write", is_flag=True, help="Write defaulted values back to PATH")
@click.pass_obj
def validate(settings: Settings, path: Path, write: bool):
    """Validate PATH and apply default values."""
    try:
        cfg = _load(path)
        cfg.validate()
        if write:
            _write(cfg, path, settings.output.sort_remotes)
    except (GitCfgError, OSError) as e:
        _fail(e)

    click.echo(f"✓ {path} is valid")


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--sort/--no-sort",
    "sort_remotes",
    default=None,
    help="Sort remotes by name (default: from settings)",
)
@click.pass_obj
def fmt(settings: Settings, path: Path, sort_remotes: Optional[bool]):
    """Print PATH re-encoded in canonical git-config form."""
    if sort_remotes is None:
        sort_remotes = settings.output.sort_remotes

    try:
        data = _load(path).marshal(sort_remotes=sort_remotes)
    except (GitCfgError, OSError) as e:
        _fail(e)

    click.echo(data.decode("utf-8", "replace"), nl=False)


@cli.command("remote-add")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("name")
@click.argument("url")
@click.option("--fetch", "fetch", multiple=True, help="Fetch refspec (repeatable)")
@click.pass_obj
def remote_add(settings: Settings, path: Path, name: str, url: str, fetch: Tuple[str, ...]):
    """Add remote NAME pointing at URL to PATH."""
    try:
        cfg = _load(path) if path.exists() else new_config()
        if name in cfg.remotes:
            _fail(GitCfgError(f"remote '{name}' already exists"))

        remote = RemoteConfig(name=name, url=url, fetch=list(fetch))
        for spec in remote.fetch:
            if not spec.is_valid():
                _fail(GitCfgError(f"invalid refspec: {spec}"))

        cfg.add_remote(remote)
        cfg.validate()
        _write(cfg, path, settings.output.sort_remotes)
    except (GitCfgError, OSError) as e:
        _fail(e)

    click.echo(f"✓ Added remote '{name}'")


@cli.command("remote-rm")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("name")
@click.pass_obj
def remote_rm(settings: Settings, path: Path, name: str):
    """Remove remote NAME from PATH."""
    try:
        cfg = _load(path)
        cfg.remove_remote(name)
        _write(cfg, path, settings.output.sort_remotes)
    except (GitCfgError, OSError) as e:
        _fail(e)

    click.echo(f"✓ Removed remote '{name}'")


if __name__ == "__main__":
    cli()
