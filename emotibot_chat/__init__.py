"""
EmotiBot Chat - emotion-aware supportive chat with mood trend tracking.

This package classifies the emotional tone of chat messages, scores their
intensity, tracks how the conversation's mood evolves and picks a supportive
reply, optionally delegating to a remote text-completion model.
"""

__version__ = "0.1.0"
