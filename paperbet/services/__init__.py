"""Calculator services: validate raw form input, then run the core math."""
