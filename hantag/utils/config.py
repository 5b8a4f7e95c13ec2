from rich.console import Console
from rich.prompt import Prompt, Confirm
from rich.markdown import Markdown

from pathlib import Path
import configparser
import logging

from platformdirs import user_data_dir

from hantag.constants import JVM_MAX_HEAP_SIZE
from hantag.errors import *

L = logging.getLogger("hantag")

C = Console()

CONFIG_PATH = Path.home()/".hantag.ini"

WELCOME = """
# Hello! Welcome to hantag!

This appears to be your first time using hantag's command line interface, so
let's go through a bit of first-time setup.

hantag runs the Hannanum analyzer inside a Java virtual machine, and unpacks
its dictionaries and plugin configuration from `models.zip` into a resource
folder the first time it runs.
"""

FOLDERS = """
## Configuration
The options you selected are stored in `~/.hantag.ini`; feel free to edit that
file later. Its sections are `[resources]` (`root`, `archive`) and `[jvm]`
(`path`, `max_heap_size`).
"""

def _defaults():
    config = configparser.ConfigParser()
    config["resources"] = {}
    config["jvm"] = {"max_heap_size": str(JVM_MAX_HEAP_SIZE)}
    return config

def interactive_setup(path=CONFIG_PATH):
    config = _defaults()

    C.print(Markdown(WELCOME))

    root = Prompt.ask("\nWhere should the model resources be unpacked?",
                      default=user_data_dir("hantag"), console=C)
    config["resources"]["root"] = root.strip()

    if Confirm.ask("\nDo you want to point hantag at a specific JVM library?", default=False, console=C):
        jvm = Prompt.ask("Path to libjvm", console=C)
        config["jvm"]["path"] = jvm.strip()

    C.print(Markdown(FOLDERS))
    C.print("\n[bold green]All set![/bold green] Continuing with hantag...\n")

    with open(path, 'w') as df:
        config.write(df)
    return config

def config_read(interactive=False, required=False, path=CONFIG_PATH):
    """Read the hantag configuration.

    Parameters
    ----------
    interactive : bool
        Run first-time setup if no configuration exists.
    required : bool
        Raise ConfigNotFoundError if no configuration exists
        (and `interactive` is off) instead of using defaults.
    path : Path
        Location of the configuration file.

    Returns
    -------
    configparser.ConfigParser
        The configuration, with default sections filled in.
    """
    
    try:
        with open(path, 'r') as df:
            config = _defaults()
            config.read_file(df)
            return config
    except FileNotFoundError:
        if interactive:
            return interactive_setup(path)
        elif required:
            raise ConfigNotFoundError(f"hantag cannot find a configuration file. Run 'hantag' in the command line to generate one, or write one yourself and place it at `{path}`.")
        else:
            L.debug(f"No configuration at '{path}', using defaults.")
            return _defaults()

def jvm_options(config):
    """JVM path and heap size (MB) from a configuration."""

    path = config.get("jvm", "path", fallback=None) or None
    heap = config.getint("jvm", "max_heap_size", fallback=JVM_MAX_HEAP_SIZE)
    return path, heap
