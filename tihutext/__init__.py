"""Persian text-to-speech front end: corpus model, pronunciations, hzip data files and g2p."""

__version__ = "0.1.0"