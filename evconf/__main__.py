"""
Entry point for the `evconf` command-line interface.

evconf parses block-structured configuration files into a store and fires
a change event for every value that differs across a (re)load.
"""


def main():
    """Main entry point for the evconf CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
