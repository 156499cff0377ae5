"""Building blocks for a music tracker: deferred event callbacks, instrument and
sample models, binary readers, input state and a file chooser model."""

__version__ = "0.1.0"