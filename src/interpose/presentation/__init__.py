"""interpose presentation layer: user-facing API and pytest plugin."""
