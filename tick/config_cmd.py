from fncli import cli

from . import config
from .lib.output import echo


@cli("tick config", name="show", default=True)
def show():
    """Show config values"""
    for key, value in config.Config().items().items():
        echo(f"  {key}: {value}")


@cli("tick config", name="set")
def set_(key: str, value: str):
    """Set a config value"""
    config.set_value(key, value)
    echo(f"{key} = {config.Config().get(key)}")
