"""Item targets for operations that act on a message, a file or a file comment.

Several operations take "exactly one of" `channel`+`timestamp`, `file` or
`file_comment`. The target types below make each legal combination its own
type, and `resolve_target` rejects the illegal ones before a call is made.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ValidationError

TARGET_KEYS = ("timestamp", "file", "file_comment")

TARGET_OPERATIONS = frozenset(
    {
        "pins.add",
        "pins.remove",
        "reactions.add",
        "reactions.get",
        "reactions.remove",
        "stars.add",
        "stars.remove",
    }
)

# Pins always name the channel, whichever item is pinned
CHANNEL_REQUIRED_OPERATIONS = frozenset({"pins.add", "pins.remove"})


class MessageTarget(BaseModel):
    """A message, addressed by channel and timestamp."""

    channel: str = Field(..., min_length=1)
    timestamp: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    def to_args(self) -> dict[str, Any]:
        return {"channel": self.channel, "timestamp": self.timestamp}


class FileTarget(BaseModel):
    """A file, addressed by file id."""

    file: str = Field(..., min_length=1)
    channel: str | None = None

    model_config = ConfigDict(frozen=True)

    def to_args(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class FileCommentTarget(BaseModel):
    """A file comment, addressed by comment id."""

    file_comment: str = Field(..., min_length=1)
    channel: str | None = None

    model_config = ConfigDict(frozen=True)

    def to_args(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


ItemTarget = Union[MessageTarget, FileTarget, FileCommentTarget]


def requires_target(op_id: str) -> bool:
    return op_id in TARGET_OPERATIONS


def resolve_target(op_id: str, args: dict[str, Any]) -> ItemTarget:
    """Build the item target an operation's arguments describe.

    Args:
        op_id: Operation identifier
        args: Call arguments

    Returns:
        MessageTarget, FileTarget or FileCommentTarget

    Raises:
        ValidationError: If not exactly one target is supplied, a timestamp
            comes without its channel, or a pins operation has no channel
    """
    supplied = [key for key in TARGET_KEYS if args.get(key) is not None]
    if len(supplied) != 1:
        raise ValidationError(
            f"{op_id} requires exactly one of timestamp (with channel), file, "
            f"file_comment; got {supplied or 'none'}"
        )

    channel = args.get("channel")
    if op_id in CHANNEL_REQUIRED_OPERATIONS and not channel:
        raise ValidationError(f"{op_id} requires channel")

    key = supplied[0]
    try:
        if key == "timestamp":
            if not channel:
                raise ValidationError(f"{op_id}: timestamp must be paired with channel")
            return MessageTarget(channel=channel, timestamp=str(args["timestamp"]))
        if key == "file":
            return FileTarget(file=args["file"], channel=channel)
        return FileCommentTarget(file_comment=args["file_comment"], channel=channel)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid target for {op_id}: {e}") from e
