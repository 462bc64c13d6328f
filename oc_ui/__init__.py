"""Developer CLI for option-checker-lib."""
