"""Infrastructure layer: configuration, logging, adapters and wiring."""
