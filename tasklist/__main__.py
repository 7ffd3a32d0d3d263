"""Entry point for running as a module: python -m tasklist"""
from tasklist.cli import cli


if __name__ == '__main__':
    cli()
