"""Module entrypoint for `python -m semantic_key_lint`."""

from .linter.run_lint import main


if __name__ == "__main__":
    main()
