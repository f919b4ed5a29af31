"""Data models shared between the plugin host contract and the plugins."""
