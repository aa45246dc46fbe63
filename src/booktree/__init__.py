# ABOUTME: Top-level package for booktree.
# ABOUTME: An in-memory, title-ordered book catalog with an interactive console menu.
