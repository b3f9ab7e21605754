"""Built-in formatter plugins (entry point group ``gitai.formatters``)."""
