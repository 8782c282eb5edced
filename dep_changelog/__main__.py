from dep_changelog.cli import cli

cli()
