"""Main entry point for the xor_sleuth package."""
from xor_sleuth.cli import cli


def main():
    """Main entry point function."""
    cli()


if __name__ == "__main__":
    main()
