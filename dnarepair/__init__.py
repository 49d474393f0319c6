from . import common, errors, classes, services, seeds

__version__ = "1.0.0"
