"""Flag geometry engine: build, resolve, lay out."""
