"""
Command-line entry point for tasklist.

There are no subcommands: the whole interaction is the action menu.
Tasks are loaded once at startup and saved once after Quit.
"""
import logging

import click

from tasklist.actions import ActionLoop
from tasklist.constants import (
    get_config_manager,
    get_deferred_remove,
    get_log_dir,
    get_log_level,
    get_seed_defaults,
    get_tasks_file,
)
from tasklist.display import Renderer
from tasklist.exceptions import StorageError
from tasklist.logging_setup import setup_logging
from tasklist.managers.storage_manager import StorageManager
from tasklist.managers.task_repository import MapTaskRepository
from tasklist.prompts import Prompter

logger = logging.getLogger(__name__)


@click.command(name="tasklist")
def cli():
    """A terminal task list: add, list and remove tasks by priority."""
    config = get_config_manager()
    log_file = setup_logging(log_dir=get_log_dir(), file_level=get_log_level())
    logger.debug("Logging to %s, config from %s", log_file, config.config_path)

    storage = StorageManager(get_tasks_file())
    repository = MapTaskRepository()
    try:
        count = storage.load_into(repository, seed_defaults=get_seed_defaults())
    except StorageError as e:
        logger.info("Startup failed: %s", e)
        raise click.ClickException(str(e))
    logger.info("Starting with %d task(s)", count)

    loop = ActionLoop(
        repository,
        Prompter(),
        renderer=Renderer(),
        deferred_remove=get_deferred_remove(),
    )
    loop.run()

    try:
        storage.save_from(repository)
    except StorageError as e:
        logger.info("Saving failed, changes from this session are lost: %s", e)
        raise click.ClickException(str(e))


if __name__ == '__main__':
    cli()
