"""gmir - a terminal reader for gemtext documents."""
