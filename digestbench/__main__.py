"""
Entry point for the `digestbench` command-line interface.

digestbench computes MD5, SHA-1, SHA-2 and SHA-3 digests of a text string
side by side, with per-algorithm timing and a known-answer self-test.

This module provides the main() entry point that delegates to the Click CLI.
"""


def main():
    """Main entry point for the digestbench CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
