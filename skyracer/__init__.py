"""Sky Racer: a terminal arcade game of dodging and shooting meteors, with a text menu and a score ranking file."""

__version__ = "0.1.0"