"""CLI entry point for persona-chat."""

from __future__ import annotations

import sys

import click

from persona_chat import __version__


@click.command()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(dir_okay=False),
    help='Path to YAML config file.',
)
@click.option(
    '-d',
    '--data-dir',
    default=None,
    type=click.Path(file_okay=False),
    help='Directory for saved settings, character and debug log.',
)
@click.version_option(version=__version__)
def cli(config_path, data_dir):
    """persona-chat -- chat with a persona on any OpenAI-compatible API."""
    from persona_chat.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from persona_chat.l4_frameworks_and_drivers.config import (  # noqa: PLC0415 -- deferred: not needed for --help
        build_app_config,
    )

    try:
        overrides: dict = {}
        if data_dir:
            overrides['storage'] = {'directory': data_dir}
        raw = YamlConfigLoader().load_raw(config_path, overrides=overrides if overrides else None)
        config = build_app_config(raw)
    except FileNotFoundError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    from persona_chat.l4_frameworks_and_drivers.app import (  # noqa: PLC0415 -- deferred: Textual TUI not loaded for --help
        ChatApp,
    )
    from persona_chat.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: Textual TUI not loaded for --help
        DependencyContainer,
    )

    container = DependencyContainer(config)
    app = ChatApp(
        chat_api=container.chat_api,
        store=container.store,
        log_dir=container.data_dir,
        log_level=config.logging.level,
    )
    app.run()
