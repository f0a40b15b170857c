from .line_source import LineSampleSource, parse_sample

__all__ = ["LineSampleSource", "parse_sample"]
