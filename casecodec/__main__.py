"""Module entrypoint for running casecodec as ``python -m casecodec``."""

from __future__ import annotations

from casecodec.cli import main


if __name__ == "__main__":
    main()
