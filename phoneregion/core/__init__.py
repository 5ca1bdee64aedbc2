"""Region resolution and capability queries over a built index."""
