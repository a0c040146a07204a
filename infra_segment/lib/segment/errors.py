class SegmentError(Exception):
    """Base class for errors raised while defining a network segment"""


class SegmentValidationError(SegmentError, ValueError):
    def __init__(self, field: str, reason: str = "must be a non-empty string"):
        super().__init__(f"Invalid network segment field '{field}': {reason}")
        self.field = field


class UnsupportedTargetKind(SegmentValidationError):
    def __init__(self, target_kind, supported: list[str]):
        super().__init__(
            "target_kind",
            f"unsupported target kind {target_kind!r} (expected one of {', '.join(supported)})",
        )
        self.target_kind = target_kind


class GraphError(SegmentError):
    """Raised when a declaration graph would contain duplicate names or dangling references"""
