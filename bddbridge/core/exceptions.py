"""Errors raised by the host layer around the conversion pipeline"""


class BddBridgeError(Exception):
    """Base class for bddbridge errors"""


class UnsupportedSourceError(BddBridgeError):
    """The input file is not a JavaScript or TypeScript test script"""


class ConfigError(BddBridgeError):
    """A configuration file could not be read"""
