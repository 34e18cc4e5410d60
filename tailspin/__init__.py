"""Log file highlighter for the terminal: colours lines from files, folders, commands or stdin."""

__version__ = "0.1.0"