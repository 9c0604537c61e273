"""Allow `python -m pdfqa`."""

from pdfqa.main import cli

cli()
