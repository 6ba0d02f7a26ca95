from stylecraft.cli.main import cli

__all__ = ["cli"]
