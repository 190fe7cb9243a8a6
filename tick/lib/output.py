import sys

__all__ = ["echo"]


def echo(msg: str = "", err: bool = False) -> None:
    stream = sys.stderr if err else sys.stdout
    stream.write(msg + "\n")
