"""
tracelink CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import click

from .commands import limits, link, vertices


@click.group()
@click.version_option(package_name="tracelink")
def main():
    """tracelink: Trace search links for dependency graph vertices.

    \b
    Quick Start:
      tracelink vertices -i paths.json
      tracelink link "my-service" -i paths.json
      tracelink limits
    """
    pass


# Register commands
main.add_command(link.link)
main.add_command(limits.limits)
main.add_command(vertices.vertices)

if __name__ == "__main__":
    main()
