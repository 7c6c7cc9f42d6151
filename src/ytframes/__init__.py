"""ytframes: download a video and turn it into a numbered frame sequence."""

__version__ = "0.1.0"
