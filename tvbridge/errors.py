"""Error taxonomy for typed <-> dynamic conversion."""
from __future__ import annotations

from typing import Any, List, Optional, Union

PathStep = Union[str, int]


class BridgeError(RuntimeError):
    """Base class for every conversion failure."""
    pass


# ── descriptor / payload problems ───────────────────────────────────────────
class UnsupportedTypeError(BridgeError):
    """Descriptor kind outside the closed set, or malformed type notation."""

    def __init__(self, kind: Any, message: Optional[str] = None):
        self.kind = kind
        super().__init__(message or f"unsupported type kind: {kind!r}")


class ValueTypeError(BridgeError):
    """Payload does not fit the descriptor it is paired with."""
    pass


class NestingDepthError(BridgeError):
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"value nesting exceeds maximum depth of {limit}")


# ── decode ──────────────────────────────────────────────────────────────────
class DecodeError(BridgeError):
    pass


class UnknownValueError(DecodeError):
    def __init__(self, message: str = "cannot decode unknown values to dynamic values"):
        super().__init__(message)


# ── encode ──────────────────────────────────────────────────────────────────
class EncodeError(BridgeError):
    pass


class UnsupportedShapeError(EncodeError):
    """Runtime container shape does not match the descriptor."""
    pass


class UnexpectedAttributeError(UnsupportedShapeError):
    def __init__(self, names: List[str]):
        self.names = names
        super().__init__(f"unexpected attribute(s): {', '.join(names)}")


class MissingTypeError(EncodeError):
    pass


class NestedEncodeError(EncodeError):
    """Wraps a failure below an attribute, position or map key.

    Wrappers nest, so ``path`` walks the whole chain from the outermost
    step down to the value that actually failed.
    """

    reason = "nested encode failure"

    def __init__(self, step: PathStep, cause: Optional[BaseException]):
        self.step = step
        self.cause = cause
        super().__init__(f"{self.format_path(self.path)}: {self.detail}")

    @property
    def path(self) -> List[PathStep]:
        steps: List[PathStep] = []
        err: Optional[BaseException] = self
        while isinstance(err, NestedEncodeError):
            steps.append(err.step)
            err = err.cause
        return steps

    @property
    def root_cause(self) -> BaseException:
        """Deepest error in the chain (a leaf wrapper has no cause)."""
        err: BaseException = self
        while isinstance(err, NestedEncodeError) and err.cause is not None:
            err = err.cause
        return err

    @property
    def detail(self) -> str:
        root = self.root_cause
        return root.reason if isinstance(root, NestedEncodeError) else str(root)

    @staticmethod
    def format_path(path: List[PathStep]) -> str:
        out = ""
        for step in path:
            if isinstance(step, int):
                out += f"[{step}]"
            else:
                out += f".{step}" if out else step
        return out


class AttributeEncodeError(NestedEncodeError):
    pass


class MissingAttributeError(AttributeEncodeError):
    def __init__(self, name: str):
        super().__init__(name, None)

    @property
    def reason(self) -> str:
        return f"required attribute {self.step!r} is missing"


class ElementEncodeError(NestedEncodeError):
    pass


class EntryEncodeError(NestedEncodeError):
    pass


# ── serialization ───────────────────────────────────────────────────────────
class NumberRangeError(BridgeError):
    """JSON integer too large to read without losing digits."""

    def __init__(self, literal: str):
        self.literal = literal
        super().__init__(f"integer {literal} is outside the 64-bit range and would lose precision")
