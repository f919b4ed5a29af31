"""answer-plugins — Sidebar and search-provider plugins for the Answer Q&A platform."""

__version__ = "0.1.0"
