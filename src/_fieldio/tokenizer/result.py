from dataclasses import dataclass
from enum import Enum, auto, unique
from typing import List, Optional


@unique
class ParseStatus(Enum):
    PRODUCED = auto()
    SKIPPED = auto()
    EXHAUSTED = auto()


@dataclass(frozen=True)
class ParseResult:
    """
    The outcome of one tokenizer call.

    status is PRODUCED when a row/group was written to the output, SKIPPED
    when one was read but suppressed by the policy, and EXHAUSTED when
    the stream had no more characters when the call started. Errors are
    raised rather than returned.

    readable is False once the call has hit the end of the stream, so
    further calls will only report EXHAUSTED.
    """

    status: ParseStatus
    fields: Optional[List[str]]
    readable: bool

    @property
    def produced(self):
        return self.status == ParseStatus.PRODUCED

    @property
    def exhausted(self):
        return self.status == ParseStatus.EXHAUSTED

    def __bool__(self):
        raise TypeError(
            "ParseResult has no truth value, check .status, .produced or .readable"
        )
