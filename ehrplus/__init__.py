"""EHRPlus command-line tools: YAML configuration, a Docker container picker and a demo menu."""

__version__ = "0.1.0"