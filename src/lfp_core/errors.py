"""Error kinds raised or reported while splitting a container."""
from __future__ import annotations

ERRORS = {
    "E_NOT_LFP": "Input does not start with the LFP signature",
    "E_TRUNCATED_RECORD": "Remaining bytes too short for a record header",
    "E_OVERSIZED_PAYLOAD": "Declared payload length exceeds remaining bytes",
    "E_NO_IMAGES": "Fewer than three records; no images found",
}


class LFPError(ValueError):
    code = ""

    def __init__(self, detail: str = ""):
        self.detail = detail
        msg = ERRORS[self.code]
        super().__init__(f"{msg}: {detail}" if detail else msg)


class NotAContainer(LFPError):
    code = "E_NOT_LFP"


class TruncatedRecord(LFPError):
    code = "E_TRUNCATED_RECORD"


class OversizedPayloadDeclaration(LFPError):
    code = "E_OVERSIZED_PAYLOAD"


class InsufficientRecords(LFPError):
    code = "E_NO_IMAGES"

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"parsed {count} record(s)")
