class EmojiPickerError(Exception):
    """Base class for all emoji_picker errors."""


class ArgumentError(EmojiPickerError, ValueError):
    """
    A method call arrived with a missing or wrongly shaped argument.
    Reported back to the caller as a 'bad_argument' error result.
    """

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(f"Argument '{name}': {message}")


class ChannelError(EmojiPickerError):
    """Raised on channel misuse (e.g. opening the same channel twice)."""
