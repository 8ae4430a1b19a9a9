"""Core — models, configuration, persistence and use cases."""
