# SPDX-License-Identifier: MIT

import atexit
import logging

from plangrid import configuration
from plangrid.repository.configuration import CONFIGURATION_REPO

logger = logging.getLogger(__name__)


def flush_repositories() -> None:
    # Plans are read-only; only settings changed by `config set` need writing
    if CONFIGURATION_REPO.flush():
        logger.debug("saved settings to %s", configuration.APP_CONFIG_PATH)


def register_cleanup() -> None:
    atexit.register(flush_repositories)
