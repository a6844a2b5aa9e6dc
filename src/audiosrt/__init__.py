"""audio-to-srt: convert audio files to SRT subtitles using Whisper."""

__version__ = "0.1.0"
