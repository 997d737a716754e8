"""
CLI Package for Content Gatekeeper

Provides the command line interface using a Click group with one module per
subcommand. The cli() function serves as the console script entry point
for setup.py.
"""

import os

import click
from dotenv import load_dotenv

# Load environment variables from .env files
# Priority: .env.dev (if exists) overrides .env
if os.path.exists('.env.dev'):
    load_dotenv('.env.dev')
elif os.path.exists('.env'):
    load_dotenv('.env')

from .validate import validate


@click.group()
@click.version_option(version='1.0.0', prog_name='content-gatekeeper')
def main():
    """Content Gatekeeper CLI - Validate generated game manifests.

    Checks structure, business rules and unsafe markup of AI-generated
    dialogue and quiz content before it reaches a deployment pipeline.
    """
    pass


# Register subcommands
main.add_command(validate)


# Entry point for setup.py console script
def cli():
    """Console script entry point.

    This function is called when the content-gatekeeper command is executed
    from the command line after installation via pip.
    """
    main()
