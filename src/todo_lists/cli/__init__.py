"""
Command-line layer.

- bootstrap.py: composition root (settings -> TodoStore)
- commands.py: slash-command registry and text rendering
- main.py: entry point
"""
