"""Package and republish VS Code built-in extensions."""
