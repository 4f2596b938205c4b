"""ClauseGloss CLI commands."""
