"""Guided resume builder: wizard, drafts, template layout and PDF export."""

__version__ = "0.1.0"


def main() -> None:
    """Entry point for the application."""
    from resume_builder.api.main import main as api_main

    api_main()
