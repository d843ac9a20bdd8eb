"""encodex command-line interface."""
