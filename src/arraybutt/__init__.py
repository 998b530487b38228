"""ArrayButt: a Discord bot serving random quotes from a remote JSON document."""
