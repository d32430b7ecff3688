from devenv.main import cli

cli()
