"""Built-in analyzer plugins (entry point group ``gitai.analyzers``)."""
