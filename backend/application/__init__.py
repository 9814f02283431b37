"""Application layer: command and query handlers over the domain ports."""
