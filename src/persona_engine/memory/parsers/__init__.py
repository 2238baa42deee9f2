from .plaintext import format_transcript, parse_transcript, parse_transcript_bytes

__all__ = ["format_transcript", "parse_transcript", "parse_transcript_bytes"]
