from inlinetypes.cli.main import cli

cli()
