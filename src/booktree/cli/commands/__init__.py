# ABOUTME: Subcommands for the booktree CLI.
# ABOUTME: Each module defines one Click command registered on the root group.
