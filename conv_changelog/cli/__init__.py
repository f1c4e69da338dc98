# CLI interface domain

from conv_changelog.cli.commands import app


def main():
    from conv_changelog.cli.log_config import configure_logging

    configure_logging(app)
    app()


__all__ = ["main", "app"]
