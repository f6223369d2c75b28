"""Allow running the composer with ``python -m stamp``."""

from stamp.cli import main


if __name__ == "__main__":
    main(prog_name="stamp")
