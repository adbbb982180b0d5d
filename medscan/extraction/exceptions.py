from medscan.processor.exceptions import ScanToolError


class ExtractionError(ScanToolError):
    """Raised when text cannot be extracted from an input file."""
