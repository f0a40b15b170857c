from .json_reporter import JsonReporter
from .rich_reporter import RichReporter, bucket_labels, column

__all__ = ["JsonReporter", "RichReporter", "bucket_labels", "column"]
