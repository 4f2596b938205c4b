"""Command-line host for ClauseGloss."""
