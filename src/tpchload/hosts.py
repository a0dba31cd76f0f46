import logging
import pathlib
from typing import List

from tpchload.errors import InvalidHostCount

logger = logging.getLogger(__name__)

# Data generation is only supported on the local machine.
REQUIRED_HOST_COUNT = 1


def read_hosts(path: str | pathlib.Path) -> List[str]:
    """
    Returns the non-blank lines of the host list with surrounding whitespace
    removed, in file order.
    """
    hosts = []
    with open(path, "r", encoding="UTF-8") as file:
        for line in file:
            host = line.strip()
            if len(host) == 0:
                continue
            hosts.append(host)
    return hosts


def load_hosts(path: str | pathlib.Path) -> List[str]:
    hosts = read_hosts(path)
    if len(hosts) != REQUIRED_HOST_COUNT:
        raise InvalidHostCount(
            "The hosts file '{}' should contain a single line "
            "that says localhost".format(path)
        )
    logger.debug("Loaded hosts: %s", hosts)
    return hosts
