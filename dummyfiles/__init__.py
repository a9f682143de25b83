"""DummyFiles command line application."""
