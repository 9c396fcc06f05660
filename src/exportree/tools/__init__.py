"""Tree rendering, ignore rules and start-path resolution."""
