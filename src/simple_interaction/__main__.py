"""Module executed when running ``python -m simple_interaction``."""

from simple_interaction.cli import main


if __name__ == "__main__":
    main()
