"""Realtime chat and poke broadcast over Socket.IO."""
