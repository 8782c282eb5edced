"""Track package.json dependency changes in a changelog."""
