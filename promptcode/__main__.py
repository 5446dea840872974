from promptcode.cli import cli

cli()
