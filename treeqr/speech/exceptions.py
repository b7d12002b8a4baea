class SpeechError(Exception):
    """Base exception for speech synthesis proxying."""


class EmptyTextError(SpeechError):
    """Raised when no text was given to synthesize."""


class TtsUnavailableError(SpeechError):
    """Raised when the speech synthesis service cannot be reached."""
