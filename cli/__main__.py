"""
Run the content-gatekeeper CLI with ``python -m cli``.
"""

from . import cli

if __name__ == '__main__':
    cli()
