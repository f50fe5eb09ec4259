"""Container bootstrap."""

from wirebox.core.container import Container
from wirebox.utils.config import Config


def create_container(load_config: bool = True) -> Container:
    """Create a container configured from ~/.wirebox/config.json.

    Args:
        load_config: Read the config file; use defaults when False
    """
    config = Config.load() if load_config else Config()
    return Container(config=config)
