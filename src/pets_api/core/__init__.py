"""Cross-cutting building blocks: settings, logging and database wiring."""
