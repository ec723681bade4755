"""Main entry point for quote-guess CLI."""

from src.cli.app import app


def main():
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    main()
